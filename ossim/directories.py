"""Single-level and two-level directory structures."""

from __future__ import annotations

from collections.abc import Iterator


class DirectoryError(Exception):
    """Raised when a directory operation cannot be carried out."""


class SingleLevelDirectory:
    """A flat directory of file names.

    Deleting a file moves the last file into its place, so the listing
    order is not kept across deletions.
    """

    def __init__(self, name: str = "", capacity: int = 100) -> None:
        self.name = name
        self.capacity = capacity
        self._files: list[str] = []

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, name: object) -> bool:
        return name in self._files

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def add(self, name: str) -> None:
        """Add a file; raises DirectoryError when the directory is full."""
        if len(self._files) >= self.capacity:
            raise DirectoryError("directory is full")
        self._files.append(name)

    def delete(self, name: str) -> None:
        """Delete a file; raises DirectoryError if it is not there."""
        try:
            index = self._files.index(name)
        except ValueError:
            raise DirectoryError(f"file {name!r} not found") from None
        last = self._files.pop()
        if index < len(self._files):
            self._files[index] = last

    def files(self) -> list[str]:
        """The file names in their current order."""
        return list(self._files)


class TwoLevelDirectory:
    """A set of named directories, each holding its own files."""

    def __init__(self, capacity: int = 10, files_per_directory: int = 100) -> None:
        self.capacity = capacity
        self.files_per_directory = files_per_directory
        self._directories: list[SingleLevelDirectory] = []

    def __len__(self) -> int:
        return len(self._directories)

    def _matching(self, directory: str) -> list[SingleLevelDirectory]:
        found = [entry for entry in self._directories if entry.name == directory]
        if not found:
            raise DirectoryError(f"directory {directory!r} not found")
        return found

    def create_directory(self, name: str) -> None:
        """Create an empty directory; raises DirectoryError when full."""
        if len(self._directories) >= self.capacity:
            raise DirectoryError("no room for another directory")
        self._directories.append(SingleLevelDirectory(name, self.files_per_directory))

    def add_file(self, directory: str, name: str) -> None:
        """Add a file to the first directory with the given name."""
        self._matching(directory)[0].add(name)

    def delete_file(self, directory: str, name: str) -> None:
        """Delete a file from a directory with the given name."""
        for entry in self._matching(directory):
            if name in entry:
                entry.delete(name)
                return
        raise DirectoryError(f"file {name!r} not found in {directory!r}")

    def listing(self) -> list[tuple[str, list[str]]]:
        """Each directory name with its files, in creation order."""
        return [(entry.name, entry.files()) for entry in self._directories]