"""Emitter for ``scenes.py``."""

from __future__ import annotations

from stgen.model import Scene

from ._naming import NamingContext
from ._writer import SourceWriter, doc_text


class ScenesWriter(SourceWriter):

    def write_module(self, scenes: list[Scene], naming: NamingContext) -> None:
        self.write_header(
            "SmartThings scene clients.",
            [
                "from stgen import runtime",
                "from stgen.client import SmartThingsClient",
            ],
        )
        for scene, name in naming.name_scenes(scenes):
            label = doc_text(scene.display_name)
            self._line()
            self._line()
            self._line(f"def {name.method_name}(client: SmartThingsClient) -> {name.type_name}:")
            self._indent_inc()
            self.write_docstring(f'Gets a scene client for "{label}".')
            self._line(f"return {name.type_name}(client)")
            self._indent_dec()
            self._line()
            self._line()
            self._line(f"class {name.type_name}(runtime.Scene):")
            self._indent_inc()
            self.write_docstring(f'Scene "{label}".')
            self._line()
            self.write_raw("RAW", scene.stable_dump())
            self._indent_dec()
