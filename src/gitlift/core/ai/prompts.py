"""Prompt text for each artifact kind."""

from gitlift.core.ai.contexts import CommitContext, PrContext

NO_COMMIT_SUMMARIES = "No commit summaries available."


def build_pr_prompts(context: PrContext, language: str) -> tuple[str, str]:
    """Return (system_prompt, user_prompt) for a pull request."""
    system_prompt = (
        f"You are an expert programmer assisting with drafting a GitHub Pull Request in "
        f"{language}. Based on the provided git diff (representing changes since the base "
        "branch) and commit summaries, generate a concise, informative title (max 70 chars) "
        "and a detailed body description for the PR. The title should summarize the main "
        "changes reflected in the commits and diff. The body should explain the purpose and "
        "context of the changes, referencing the commit summaries if helpful. Use markdown "
        "formatting for the body."
    )
    commits = context.commit_log.strip() or NO_COMMIT_SUMMARIES
    user_prompt = (
        f"Git Diff:\n```diff\n{context.diff}\n```\n\n"
        f"Commit Summaries:\n```\n{commits}\n```\n\n"
        f"Please generate the PR title and body in {language}."
    )
    return system_prompt, user_prompt


def build_commit_prompts(context: CommitContext, language: str) -> tuple[str, str]:
    """Return (system_prompt, user_prompt) for a commit message."""
    system_prompt = (
        f"You are an expert programmer assisting with writing a Git commit message in "
        f"{language}. Based on the provided staged git diff, generate a commit message with "
        "two parts:\n"
        "1. A 'title': A concise and informative summary following conventional commit "
        "standards (e.g., 'feat: add new user authentication', 'fix: resolve issue with "
        "login button'). The title should be a single line, ideally under 72 characters and "
        "not ending with a period.\n"
        "2. A 'body': A detailed description of the changes, presented as bullet points. "
        "Each bullet point should start with '- '. Explain the 'what' and 'why' of the "
        "changes. If the changes are simple enough that the title suffices, the body can be "
        "empty.\n\n"
        "The title should summarize the main purpose of the changes shown in the diff. The "
        "body should elaborate on these changes. Ensure the body consists of bullet points "
        "if it's not empty."
    )
    user_prompt = (
        f"Staged Git Diff:\n```diff\n{context.staged_diff}\n```\n\n"
        f"Please generate the commit title and body in {language}."
    )
    return system_prompt, user_prompt
