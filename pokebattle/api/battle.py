"""
Battle endpoint.

Draws two cards and reports the winner. Calling it again is how a client
offers "Draw again" or "Try again".
"""

import logging

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from pokebattle.models.card import BattleCard
from pokebattle.models.failure import ApiResponse, FallbackUnavailableError
from pokebattle.services.battle import decide_battle
from pokebattle.services.battle_cards import fetch_two_battle_cards

logger = logging.getLogger(__name__)

router = APIRouter(tags=["battle"])


class CardSummary(BaseModel):
    """A card as shown to the player."""

    name: str
    hp: int
    small_image: str | None = None
    large_image: str | None = None

    @classmethod
    def from_card(cls, card: BattleCard) -> "CardSummary":
        return cls(
            name=card.name,
            hp=card.hp,
            small_image=card.small_image,
            large_image=card.large_image,
        )


class BattleResponse(BaseModel):
    """Response model for a battle draw."""

    left: CardSummary
    right: CardSummary
    from_fallback: bool
    winner: str | None
    is_draw: bool
    message: str


@router.get(
    "/battle",
    response_model=ApiResponse[BattleResponse],
    responses={
        500: {"model": ApiResponse[BattleResponse]},
        503: {"model": ApiResponse[BattleResponse]},
    },
)
async def battle(response: Response) -> ApiResponse[BattleResponse]:
    """
    Draw two cards and battle them.

    Returns 503 with a known_failure envelope when neither the primary API
    nor the fallback dataset can provide cards, and 500 with an
    unknown_failure envelope for anything unexpected.
    """
    try:
        result = await fetch_two_battle_cards()
    except FallbackUnavailableError as e:
        response.status_code = e.status_code
        return e.to_response()
    except Exception as e:
        logger.exception("Unexpected error drawing a battle")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ApiResponse.unknown_failure(detail=type(e).__name__)

    outcome = decide_battle(result.left, result.right)
    return ApiResponse.success(
        BattleResponse(
            left=CardSummary.from_card(result.left),
            right=CardSummary.from_card(result.right),
            from_fallback=result.from_fallback,
            winner=outcome.winner.name if outcome.winner else None,
            is_draw=outcome.is_draw,
            message=outcome.message,
        )
    )
