"""Domain errors that map onto the HTTP error bodies clients rely on."""

from __future__ import annotations


class PlannerError(Exception):
    """Base error; rendered as ``{"error": message}`` with ``status_code``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def body(self) -> dict:
        return {"error": self.message}


class ImageValidationError(PlannerError):
    status_code = 400


class ImageConfigurationError(PlannerError):
    status_code = 500


class SpeechValidationError(PlannerError):
    status_code = 400


class SpeechConfigurationError(PlannerError):
    status_code = 500


class SpeechSynthesisError(PlannerError):
    status_code = 500

    def __init__(self, details: str):
        super().__init__("TTS generation failed")
        self.details = details

    def body(self) -> dict:
        return {"error": self.message, "details": self.details}


class PdfExportError(PlannerError):
    status_code = 500

    def __init__(self, details: str):
        super().__init__("PDF export failed")
        self.details = details

    def body(self) -> dict:
        return {"error": self.message, "details": self.details}
