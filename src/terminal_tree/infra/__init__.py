"""Infrastructure layer: adapters to third-party terminal libraries.

Only this layer (and ``cli``) may import Rich.  The core reaches it
through the :class:`~terminal_tree.core.protocols.Painter` protocol.
"""

from terminal_tree.infra.ansi import RichAnsiPainter

__all__: list[str] = ["RichAnsiPainter"]
