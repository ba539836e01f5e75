"""Host adapters for the text engine."""
