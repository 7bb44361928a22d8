from pokebattle.models.card import BattleCard, FetchResult
from pokebattle.models.failure import (
    ApiResponse,
    FailureDetail,
    FailureKind,
    FallbackUnavailableError,
    KnownError,
    OutcomeType,
    RetryExhaustedError,
    TransientNetworkError,
)

__all__ = [
    "ApiResponse",
    "BattleCard",
    "FailureDetail",
    "FailureKind",
    "FallbackUnavailableError",
    "FetchResult",
    "KnownError",
    "OutcomeType",
    "RetryExhaustedError",
    "TransientNetworkError",
]
