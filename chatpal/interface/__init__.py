from chatpal.interface.ui import ChatUI, render_reply

__all__ = ["ChatUI", "render_reply"]
