"""Static checks: ruff, mypy and codespell."""

from __future__ import annotations

from pipelines import config
from pipelines import nox

IGNORED_WORDS = ["imview"]


@nox.session()
def ruff(session: nox.Session) -> None:
    """Run code linting using ruff."""
    nox.sync(session, self=True, groups=["ruff"])

    session.run("ruff", "check", *session.posargs, *config.PYTHON_REFORMATTING_PATHS)


@nox.session()
def mypy(session: nox.Session) -> None:
    """Perform static type analysis on Python source code using mypy."""
    nox.sync(session, self=True, groups=["mypy"])

    session.run("mypy", "-p", config.MAIN_PACKAGE, "--config", config.PYPROJECT_TOML)


@nox.session()
def codespell(session: nox.Session) -> None:
    """Run codespell to check for spelling mistakes."""
    nox.sync(session, groups=["codespell"])
    session.run(
        "codespell",
        "--builtin",
        "clear,rare,code",
        "--ignore-words-list",
        ",".join(IGNORED_WORDS),
        *config.FULL_REFORMATTING_PATHS,
    )
