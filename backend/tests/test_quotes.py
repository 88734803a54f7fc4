"""Tests for the motivational quote service."""

import asyncio

from fakes import fake_model, gemini_response


def _fetch(model):
    from fitplanner.services.quotes import QuoteService

    return asyncio.run(QuoteService(model).fetch())


class TestQuoteService:
    def test_model_quote_is_stripped(self):
        model = fake_model(gemini_response([{"text": '  "Small steps every day."\n'}]))

        result = _fetch(model)

        assert result.success is True
        assert result.quote == "Small steps every day."

    def test_no_model_uses_fallback(self):
        from fitplanner.services.quotes import FALLBACK_QUOTE

        assert _fetch(None).quote == FALLBACK_QUOTE

    def test_error_uses_fallback(self):
        from fitplanner.services.quotes import FALLBACK_QUOTE

        result = _fetch(fake_model(error=RuntimeError("503")))

        assert result.success is True
        assert result.quote == FALLBACK_QUOTE

    def test_empty_text_uses_fallback(self):
        from fitplanner.services.quotes import FALLBACK_QUOTE

        assert _fetch(fake_model(gemini_response([]))).quote == FALLBACK_QUOTE
