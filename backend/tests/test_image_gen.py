"""Tests for the image strategy chain."""

import asyncio
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import quote

import pytest

from fakes import fake_model, gemini_response


def _generate(model, prompt, category="exercise", strategies=None):
    from fitplanner.services.image_gen import ImageGenerator

    return asyncio.run(ImageGenerator(model, strategies).generate(prompt, category))


class TestPrompts:
    def test_exercise_prompt(self):
        from fitplanner.services.image_gen import build_primary_prompt

        prompt = build_primary_prompt("Push-up", "exercise")
        assert prompt.startswith("Professional fitness photograph: Push-up.")
        assert "proper form" in prompt

    def test_other_categories_use_food_framing(self):
        from fitplanner.services.image_gen import build_primary_prompt

        assert build_primary_prompt("Salad", "meal").startswith(
            "Professional food photograph: Salad."
        )
        assert build_primary_prompt("Salad", "dessert").startswith(
            "Professional food photograph"
        )

    def test_pollinations_url_encodes_like_uri_component(self):
        from fitplanner.services.image_gen import pollinations_url

        url = pollinations_url("professional food photo, mac & cheese (baked)")
        assert url == (
            "https://image.pollinations.ai/prompt/"
            "professional%20food%20photo%2C%20mac%20%26%20cheese%20(baked)"
            "?width=512&height=512&nologo=true"
        )


class TestValidation:
    def test_empty_prompt_rejected_before_any_call(self):
        from fitplanner.services.errors import ImageValidationError

        model = fake_model(error=AssertionError("should not be called"))
        with pytest.raises(ImageValidationError) as exc_info:
            _generate(model, "")

        assert exc_info.value.status_code == 400
        assert exc_info.value.body() == {"error": "Prompt is required"}
        model.generate_content_async.assert_not_called()

    def test_missing_prompt_checked_before_credential(self):
        from fitplanner.services.errors import ImageValidationError

        with pytest.raises(ImageValidationError):
            _generate(None, None)

    def test_missing_credential(self):
        from fitplanner.services.errors import ImageConfigurationError

        with pytest.raises(ImageConfigurationError) as exc_info:
            _generate(None, "Deadlift")

        assert exc_info.value.status_code == 500
        assert exc_info.value.body() == {"error": "Gemini API key missing"}


class TestFallbackChain:
    def test_inline_image_uses_gemini(self):
        model = fake_model(
            gemini_response(
                [
                    {"text": "Here is your image"},
                    {"inline_data": {"mime_type": "image/png", "data": "iVBORw0KGgo="}},
                ]
            )
        )

        result = _generate(model, "Deadlift")

        assert result.success is True
        assert result.method == "gemini-sdk"
        assert result.imageUrl == "data:image/png;base64,iVBORw0KGgo="
        prompt = model.generate_content_async.call_args.args[0]
        assert "Deadlift" in prompt

    def test_provider_error_falls_back_to_pollinations(self):
        model = fake_model(error=RuntimeError("quota exceeded"))

        result = _generate(model, "Bulgarian split squat")

        assert result.success is True
        assert result.method == "pollinations"
        assert quote("professional fitness photo, Bulgarian split squat") in result.imageUrl
        assert "width=512" in result.imageUrl
        assert "height=512" in result.imageUrl
        assert "nologo=true" in result.imageUrl

    def test_text_only_response_falls_back(self):
        model = fake_model(gemini_response([{"text": "I cannot draw that."}]))

        result = _generate(model, "Quinoa bowl", "meal")

        assert result.method == "pollinations"
        assert "professional%20food%20photo" in result.imageUrl

    def test_crashing_chain_returns_exercise_stock_photo(self):
        from fitplanner.services.image_gen import STATIC_FALLBACK_IMAGES

        broken = MagicMock()
        broken.name = "gemini-sdk"
        broken.attempt = AsyncMock(side_effect=ValueError("boom"))

        result = _generate(fake_model(), "Grilled chicken", "meal", strategies=[broken])

        assert result.success is True
        assert result.method == "static-fallback"
        # The requested category is ignored on this path.
        assert result.imageUrl == STATIC_FALLBACK_IMAGES["exercise"]

    def test_strategies_run_in_order_and_stop_at_first_success(self):
        from fitplanner.services.image_gen import StrategyOutcome

        calls = []

        def strategy(name, outcome):
            s = MagicMock()
            s.name = name

            async def attempt(subject, category):
                calls.append(name)
                return outcome

            s.attempt = attempt
            return s

        strategies = [
            strategy("gemini-sdk", StrategyOutcome.soft_failure("nope")),
            strategy("pollinations", StrategyOutcome.succeeded("https://img/1")),
            strategy("static-fallback", StrategyOutcome.succeeded("https://img/2")),
        ]

        result = _generate(fake_model(), "Row", strategies=strategies)

        assert calls == ["gemini-sdk", "pollinations"]
        assert result.imageUrl == "https://img/1"

    def test_exhausted_chain_returns_static_fallback(self):
        from fitplanner.services.image_gen import STATIC_FALLBACK_IMAGES, StrategyOutcome

        failing = MagicMock()
        failing.name = "gemini-sdk"
        failing.attempt = AsyncMock(return_value=StrategyOutcome.soft_failure("x"))

        result = _generate(fake_model(), "Row", strategies=[failing])

        assert result.method == "static-fallback"
        assert result.imageUrl == STATIC_FALLBACK_IMAGES["exercise"]
