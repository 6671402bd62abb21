"""CLI error handling with styled output.

Core stages raise GitLiftError subclasses and OperationCancelled; this module
is the single place they are turned into a message and an exit code. All
errors use the red "Error:" prefix for visual consistency.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from gitlift.core.errors import GitLiftError, OperationCancelled
from gitlift.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


@contextmanager
def handle_workflow_errors(feedback: UserFeedback) -> Generator[None]:
    """Report pipeline failures and exit with the matching code.

    - OperationCancelled: yellow notice, exit 0
    - GitLiftError: red "Error:" message, exit 1

    Anything else propagates unchanged.

    Raises:
        SystemExit: On any handled exception
    """
    try:
        yield
    except OperationCancelled as e:
        feedback.warning(e.message)
        raise SystemExit(0) from None
    except GitLiftError as e:
        logger.debug("%s failure", e.kind.value, exc_info=e)
        feedback.error(f"Error: {e.message}")
        raise SystemExit(1) from None
