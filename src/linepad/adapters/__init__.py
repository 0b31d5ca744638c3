"""Host adapters embedding the editor session."""
