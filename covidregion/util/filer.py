from __future__ import annotations
from pathlib import Path
import re
from typing import Any


class Filer(object):
    """Produce numbered filenames of the figures of a report in a directory.

    Args:
        directory: directory name, or list/tuple of the names of the nested directories
        prefix: prefix of the filenames or None (no prefix)
        numbering: "001", "01", "1" or None (no numbering), the width of zero-padded sequential numbers

    Examples:
        >>> import covidregion as cr
        >>> filer = cr.Filer(directory="output", prefix="south_asia", numbering="01")
        >>> filer.png("Cases trend")
        {"filename": "<absolute path>/output/south_asia_01_cases_trend.png"}
        >>> filer.png("Dual axis: Sri Lanka")
        {"filename": "<absolute path>/output/south_asia_02_dual_axis_sri_lanka.png"}

    Note:
        Sequential numbers are shared by all extensions in the order of registration.
    """
    NUMBERINGS = ("001", "01", "1", None)

    def __init__(self, directory: list[str] | tuple[str, ...] | str | Path,
                 prefix: str | None = None, numbering: str | None = None) -> None:
        if numbering not in self.NUMBERINGS:
            raise ValueError(f"@numbering must be one of {self.NUMBERINGS}, but {numbering} was applied.")
        names = [directory] if isinstance(directory, (str, Path)) else list(directory)
        self._dir_path = Path(*names).resolve()
        self._dir_path.mkdir(parents=True, exist_ok=True)
        self._prefix = prefix
        self._width = None if numbering is None else len(numbering)
        # Registered filenames: list of (extension, filename)
        self._registered: list[tuple[str, str]] = []

    @staticmethod
    def slug(title: str) -> str:
        """Convert a title to a part of filenames, like "Dual axis: Sri Lanka" to "dual_axis_sri_lanka".
        """
        return re.sub(r"[^0-9a-z]+", "_", str(title).lower()).strip("_")

    def _register(self, title: str, ext: str) -> str:
        parts = [] if self._prefix is None else [self._prefix]
        if self._width is not None:
            parts.append(str(len(self._registered) + 1).zfill(self._width))
        parts.append(self.slug(title))
        filename = str(self._dir_path.joinpath(f"{'_'.join(parts)}.{ext}"))
        self._registered.append((ext, filename))
        return filename

    def files(self, ext: str | None = None) -> list[str]:
        """Return the registered filenames.

        Args:
            ext: file extension, like "png", or None (all)
        """
        return [filename for (registered_ext, filename) in self._registered if ext is None or registered_ext == ext]

    def png(self, title: str, **kwargs: Any) -> dict[str, Any]:
        """Register a PNG filename.

        Args:
            title: title of the figure, like "cases trend"
            kwargs: keyword arguments to be included in the output

        Returns:
            absolute filename (key: "filename") and @kwargs, can be used as keyword arguments of plotting functions
        """
        return {"filename": self._register(title=title, ext="png"), **kwargs}

    def jpg(self, title: str, **kwargs: Any) -> dict[str, Any]:
        """Register a JPG filename, refer to Filer.png().
        """
        return {"filename": self._register(title=title, ext="jpg"), **kwargs}
