"""Core building blocks: display width, fragments, penalties and options."""
