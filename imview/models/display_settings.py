"""Display configuration dataclass.

The :class:`~imview.models.display_settings.DisplaySettings` model is a
lightweight container for the window title and key-wait behaviour used when an
image is shown.
"""

from __future__ import annotations

__all__ = ("DisplaySettings",)

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from imview.constants import DEFAULT_WAIT_MS, DEFAULT_WINDOW_NAME, ENV_WAIT_MS, ENV_WINDOW_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typing_extensions import Self


@dataclass(slots=True)
class DisplaySettings:
    """Persist window parameters for image display.

    Attributes:
        window_name: Title of the OpenCV window. Defaults to ``"imview"``.
        wait_ms: Delay passed to ``cv.waitKey``. ``0`` blocks until a key press. Defaults to 0.
    """

    window_name: str = DEFAULT_WINDOW_NAME
    wait_ms: int = DEFAULT_WAIT_MS

    def __post_init__(self) -> None:
        if self.wait_ms < 0:
            msg = f"wait_ms must be non-negative (received {self.wait_ms})."
            raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build settings from ``IMVIEW_WINDOW_NAME`` and ``IMVIEW_WAIT_MS``.

        Args:
            environ: Mapping to read from. Defaults to :data:`os.environ`.

        Returns:
            Settings with any environment overrides applied.

        Raises:
            ValueError: If ``IMVIEW_WAIT_MS`` is not a non-negative integer.
        """
        env = os.environ if environ is None else environ
        window_name = env.get(ENV_WINDOW_NAME) or DEFAULT_WINDOW_NAME

        raw_wait = env.get(ENV_WAIT_MS, "").strip()
        try:
            wait_ms = int(raw_wait) if raw_wait else DEFAULT_WAIT_MS
        except ValueError as exc:
            msg = f"{ENV_WAIT_MS} must be an integer (received {raw_wait!r})."
            raise ValueError(msg) from exc

        return cls(window_name=window_name, wait_ms=wait_ms)
