from gitlift.core.github.abc import GitHub
from gitlift.core.github.fake import FakeGitHub
from gitlift.core.github.real import RealGitHub

__all__ = ["FakeGitHub", "GitHub", "RealGitHub"]
