"""Infrastructure layer — HTTP access to the notes service and local session state."""
