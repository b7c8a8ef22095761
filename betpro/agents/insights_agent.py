"""Pydantic AI agent that writes a short analysis of the betting history."""

from typing import Optional, Union

from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from betpro.i18n import CURRENCY_SYMBOLS, translate
from betpro.models.schemas import Bet, Currency, Language
from config import get_settings


class InsightsAgent:
    """AI agent that turns the filtered bets into practical advice."""

    SYSTEM_PROMPT = """You are a professional sports betting analyst reviewing a bettor's personal ledger.
Be concrete and concise. Base every tip on the bets you are given:
stake sizing, the odds they usually take and how often they win or lose.
Never invent bets that are not in the list."""

    def __init__(self, model: Optional[Model] = None):
        self.settings = get_settings()
        self._model = model
        self._agent: Optional[Agent] = None

    def _get_agent(self) -> Agent:
        """Build the agent on first use."""
        if self._agent is None:
            model = self._model
            if model is None:
                model = OpenAIChatModel(
                    self.settings.openrouter_model,
                    provider=OpenAIProvider(
                        base_url=self.settings.openrouter_base_url,
                        api_key=self.settings.openrouter_api_key,
                    ),
                )
            self._agent = Agent(
                model=model,
                system_prompt=self.SYSTEM_PROMPT,
                output_type=str,
            )
        return self._agent

    @staticmethod
    def build_prompt(
        bets: list[Bet],
        language: Union[Language, str] = Language.PT,
        currency: Union[Currency, str] = Currency.BRL,
    ) -> str:
        """Localized instructions followed by one line per bet."""
        symbol = CURRENCY_SYMBOLS[Currency(currency)]
        summary = "\n".join(
            f"Match: {b.match}, Odds: {b.odds:.2f}, Stake: {symbol}{b.stake:.2f}, "
            f"Status: {b.status.value}, Profit: {symbol}{b.profit:.2f}"
            for b in bets
        )
        return f"{translate(language, 'ia_prompt')}\n\n{summary}"

    async def generate(
        self,
        bets: list[Bet],
        language: Union[Language, str] = Language.PT,
        currency: Union[Currency, str] = Currency.BRL,
    ) -> Optional[str]:
        """Generate insights for the given bets.

        Returns None when there is nothing to analyze and the localized
        fallback message when the model call fails.
        """
        if not bets:
            return None

        snapshot = [bet.model_copy(deep=True) for bet in bets]
        fallback = translate(language, "ia_error")

        try:
            prompt = self.build_prompt(snapshot, language, currency)
            result = await self._get_agent().run(prompt)
        except Exception as e:
            print(f"Insights request failed: {e}")
            return fallback

        text = (result.output or "").strip()
        return text or fallback
