"""Parsers for GitHub CLI output."""


def parse_gh_auth_status_output(output: str) -> tuple[bool, str | None, str | None]:
    """Parse `gh auth status` output.

    Recognizes both the current format
        "✓ Logged in to github.com account octocat (keyring)"
    and the older
        "✓ Logged in to github.com as octocat (oauth_token)"

    Returns:
        Tuple of (is_authenticated, username, hostname)
    """
    for line in output.splitlines():
        text = line.strip().lstrip("✓").strip()
        if not text.startswith("Logged in to "):
            continue

        words = text[len("Logged in to ") :].split()
        if not words:
            return (True, None, None)

        hostname = words[0]
        username: str | None = None
        for marker in ("account", "as"):
            if marker in words:
                position = words.index(marker)
                if position + 1 < len(words):
                    username = words[position + 1]
                break
        return (True, username, hostname)

    return (False, None, None)


def parse_pr_number_from_url(pr_url: str) -> str | None:
    """Extract the PR number from a pull request URL.

    "https://github.com/owner/repo/pull/42" -> "42". Returns None when the
    last path segment is not numeric.
    """
    last_segment = pr_url.rstrip("/").rsplit("/", 1)[-1]
    if last_segment.isdigit():
        return last_segment
    return None
