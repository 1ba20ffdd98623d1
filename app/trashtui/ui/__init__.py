"""Terminal user interface built on Textual and Rich."""
