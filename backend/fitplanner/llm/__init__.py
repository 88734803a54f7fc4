"""Provider clients (Gemini, ElevenLabs) and their response schemas."""
