"""In-memory bet collection backed by the local store.

All mutations go through ``BetStore`` so that ``profit`` is always derived
by the profit calculator, except for the explicit cashout override.
"""

import uuid
from typing import Optional, Protocol

from betpro.errors import LedgerValidationError
from betpro.ledger.parsing import combine_odds, parse_decimal
from betpro.ledger.profit import compute_profit
from betpro.models.schemas import Bet, BetDraft, BetStatus


DEFAULT_MULTIPLE_LABEL = "Multiple"


class BetStorage(Protocol):
    """Persistence collaborator used by the store."""

    def load_bets(self) -> list[Bet]: ...

    def save_bets(self, bets: list[Bet]) -> None: ...


def new_bet_id() -> str:
    """Generate an opaque bet identifier."""
    return uuid.uuid4().hex[:12]


def _draft_fields(draft: BetDraft, multiple_label: str) -> dict:
    """Bet fields derived from a form submission."""
    if draft.is_combination:
        return {
            "date": draft.date,
            "match": f"{multiple_label} ({len(draft.legs)})",
            "type": draft.type or multiple_label,
            "odds": combine_odds([leg.odd for leg in draft.legs]),
            "stake": draft.stake,
            "sub_games": [leg.model_copy() for leg in draft.legs],
        }
    leg = draft.legs[0]
    return {
        "date": draft.date,
        "match": leg.event,
        "type": draft.type,
        "odds": leg.odd,
        "stake": draft.stake,
        "sub_games": None,
    }


class BetStore:
    """Ordered bet collection, newest entries first."""

    def __init__(self, storage: Optional[BetStorage] = None):
        self._storage = storage
        self._bets: list[Bet] = []

    def load(self) -> "BetStore":
        """Replace the collection with what the storage holds."""
        if self._storage is not None:
            self._bets = self._storage.load_bets()
        return self

    def save(self) -> None:
        """Persist the current collection."""
        if self._storage is not None:
            self._storage.save_bets(self._bets)

    def list_bets(self) -> list[Bet]:
        """Snapshot of the collection."""
        return [bet.model_copy(deep=True) for bet in self._bets]

    def get(self, bet_id: str) -> Optional[Bet]:
        for bet in self._bets:
            if bet.id == bet_id:
                return bet.model_copy(deep=True)
        return None

    def __len__(self) -> int:
        return len(self._bets)

    def _replace(self, bets: list[Bet]) -> None:
        self._bets = bets
        self.save()

    def _unique_id(self, taken: set[str]) -> str:
        bet_id = new_bet_id()
        while bet_id in taken:
            bet_id = new_bet_id()
        return bet_id

    def _map_one(self, bet_id: str, change) -> Optional[Bet]:
        """Apply ``change`` to one bet and persist. Unknown ids are a no-op."""
        updated = None
        bets = []
        for bet in self._bets:
            if bet.id == bet_id:
                updated = change(bet)
                bets.append(updated)
            else:
                bets.append(bet)
        if updated is None:
            return None
        self._replace(bets)
        return updated.model_copy(deep=True)

    # ===== Mutations =====

    def add(
        self,
        draft: BetDraft,
        status: BetStatus = BetStatus.PENDING,
        multiple_label: str = DEFAULT_MULTIPLE_LABEL,
    ) -> Bet:
        """Create a bet from a validated form submission."""
        status = BetStatus(status)
        fields = _draft_fields(draft, multiple_label)
        bet = Bet(
            id=self._unique_id({b.id for b in self._bets}),
            status=status,
            profit=compute_profit(fields["stake"], fields["odds"], status),
            **fields,
        )
        self._replace([bet] + self._bets)
        return bet.model_copy(deep=True)

    def update(
        self,
        bet_id: str,
        draft: BetDraft,
        multiple_label: str = DEFAULT_MULTIPLE_LABEL,
    ) -> Optional[Bet]:
        """Full edit of every field except id and status.

        Profit is recomputed, so an earlier cashout is discarded.
        """
        fields = _draft_fields(draft, multiple_label)

        def change(bet: Bet) -> Bet:
            return bet.model_copy(update={
                **fields,
                "profit": compute_profit(fields["stake"], fields["odds"], bet.status),
            })

        return self._map_one(bet_id, change)

    def set_status(self, bet_id: str, status: BetStatus) -> Optional[Bet]:
        """Resolve a bet (or reset it to pending) and recompute its profit."""
        status = BetStatus(status)

        def change(bet: Bet) -> Bet:
            return bet.model_copy(update={
                "status": status,
                "profit": compute_profit(bet.stake, bet.odds, status),
            })

        return self._map_one(bet_id, change)

    def override_profit(self, bet_id: str, profit) -> Optional[Bet]:
        """Cashout: replace a resolved bet's profit, keeping its status.

        Raises:
            LedgerValidationError: if the value is not a number or the bet
                is still pending.
        """
        value = parse_decimal(profit)
        if value is None:
            raise LedgerValidationError(f"Invalid profit value: {profit!r}")

        current = self.get(bet_id)
        if current is None:
            return None
        if not current.status.is_resolved:
            raise LedgerValidationError("Resolve the bet before adjusting its profit")

        return self._map_one(bet_id, lambda bet: bet.model_copy(update={"profit": value}))

    def delete(self, bet_id: str) -> bool:
        """Remove a bet. Returns False when the id is unknown."""
        bets = [bet for bet in self._bets if bet.id != bet_id]
        if len(bets) == len(self._bets):
            return False
        self._replace(bets)
        return True

    def import_bets(self, bets: list[Bet]) -> int:
        """Prepend imported bets, re-keying any id already in use."""
        taken = {bet.id for bet in self._bets}
        incoming = []
        for bet in bets:
            if bet.id in taken:
                bet = bet.model_copy(update={"id": self._unique_id(taken)})
            taken.add(bet.id)
            incoming.append(bet)

        if incoming:
            self._replace(incoming + self._bets)
        return len(incoming)
