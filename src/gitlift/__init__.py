"""gitlift: AI-authored pull request descriptions and commit messages."""
