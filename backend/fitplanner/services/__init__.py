"""Image, speech, narration, PDF and quote services."""
