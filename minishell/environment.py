"""The shell's two variable lists: the environment and the export table.

The environment keeps entries in the order they were added and is what
``env`` prints and child processes receive. The export table is kept
sorted and is what ``export`` with no arguments prints. Entries are
``NAME=value`` strings; the export table may also hold ``NAME=`` entries
for names exported without a value.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["Environment", "sorted_entries"]


def sorted_entries(entries: Iterable[str]) -> list[str]:
    """Return the entries in ascending character-code order."""
    return sorted(entries)


def _lookup_key(arg: str) -> str:
    """``NAME=`` for ``NAME`` or ``NAME=value``: the prefix a match must start with."""
    name, eq, _ = arg.partition("=")
    return name + "=" if eq else arg + "="


def _defines(entry: str, name: str) -> bool:
    """True when ``entry`` is ``name`` followed directly by '='."""
    return entry.startswith(name) and entry[len(name):len(name) + 1] == "="


class Environment:
    """Environment and export lists of one shell session."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._env: list[str] = list(entries)
        self._export: list[str] = sorted_entries(self._env)

    @property
    def env_entries(self) -> tuple[str, ...]:
        """Environment entries, in insertion order."""
        return tuple(self._env)

    @property
    def export_entries(self) -> tuple[str, ...]:
        """Export table entries, in table order."""
        return tuple(self._export)

    def getenv(self, name: str) -> str | None:
        """Value of ``name`` in the environment, or None when it is not set."""
        for entry in self._env:
            if _defines(entry, name):
                return entry.partition("=")[2]
        return None

    def has(self, arg: str, exported: bool = False) -> bool:
        """Whether the name in ``arg`` (``NAME`` or ``NAME=value``) is defined.

        Looks in the export table when ``exported`` is true, otherwise in
        the environment.
        """
        key = _lookup_key(arg)
        entries = self._export if exported else self._env
        return any(entry.startswith(key) for entry in entries)

    def remove(self, names: Iterable[str]) -> None:
        """Drop the first definition of each name from both lists."""
        for name in names:
            for entries in (self._env, self._export):
                match = next(
                    (pos for pos, entry in enumerate(entries) if _defines(entry, name)),
                    None,
                )
                if match is not None:
                    del entries[match]

    def add_env(self, entry: str) -> None:
        """Append an entry to the environment."""
        self._env.append(entry)

    def add_export(self, entry: str) -> None:
        """Insert an entry into the export table before the first larger one.

        The first entry of the table always keeps its place; an entry that
        sorts before it goes right after it.
        """
        position = next(
            (
                pos
                for pos, existing in enumerate(self._export)
                if pos > 0 and existing > entry
            ),
            len(self._export),
        )
        self._export.insert(position, entry)

    def format_env(self) -> str:
        """The environment as ``env`` prints it: one entry per line."""
        return "".join(f"{entry}\n" for entry in self._env)

    def format_export(self) -> str:
        """The export table as ``export`` prints it, values in double quotes."""
        lines = []
        for entry in self._export:
            name, eq, value = entry.partition("=")
            if eq:
                lines.append(f'declare -x {name}="{value}"\n')
            else:
                lines.append(f'declare -x {entry}"\n')
        return "".join(lines)