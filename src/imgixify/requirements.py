"""Client-side script requirements collected while rendering a page.

Responsive tags (``ix-src``) only work once imgix.js is on the page.
:meth:`~imgixify.builder.TransformBuilder.responsive` registers that script
here; the page layout emits :meth:`ScriptRequirements.render` once.
"""

from __future__ import annotations

import html


class ScriptRequirements:
    """Ordered, de-duplicated set of script paths."""

    def __init__(self) -> None:
        self._scripts: list[str] = []

    def require(self, path: str) -> None:
        if path and path not in self._scripts:
            self._scripts.append(path)

    @property
    def scripts(self) -> list[str]:
        return list(self._scripts)

    def clear(self) -> None:
        self._scripts.clear()

    def render(self) -> str:
        """Return one ``<script>`` tag per required path, newline separated."""
        return "\n".join(
            f'<script type="text/javascript" src="{html.escape(path, quote=True)}"></script>'
            for path in self._scripts
        )

    def __contains__(self, path: object) -> bool:
        return path in self._scripts

    def __len__(self) -> int:
        return len(self._scripts)
