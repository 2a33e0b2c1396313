"""
Ship, Captain & Crew - Game Session Manager

Hosts several independent games side by side. Each session owns its own
engine and lock; an engine is only touched while its session lock is held,
so concurrent requests for one session are serialized and different
sessions never share state.
"""

from __future__ import annotations

import logging
import random
import secrets
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence

from ship_captain_crew.config.settings import Settings, get_settings
from ship_captain_crew.engine.base import GameConfig, RoundResult
from ship_captain_crew.engine.ship_captain_crew import ShipCaptainCrewEngine
from ship_captain_crew.session.events import EventPayload, GameEvent
from ship_captain_crew.session.models import GameSnapshot

logger = logging.getLogger(__name__)

EventCallback = Callable[[EventPayload], None]


class SessionNotFound(KeyError):
    """Raised when a session id is not registered."""


@dataclass
class GameSession:
    """An engine together with the lock that serializes access to it."""

    session_id: str
    engine: ShipCaptainCrewEngine
    lock: threading.Lock = field(default_factory=threading.Lock)
    subscribers: list[EventCallback] = field(default_factory=list)


class GameSessionManager:
    """
    Registry of hosted games.

    Provides methods for:
    - Creating and closing sessions
    - Running engine commands under the session lock
    - Fetching snapshots
    - Subscribing to session events
    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Args:
            seed: Optional seed; each new session gets its own Random derived from it
        """
        self._sessions: dict[str, GameSession] = {}
        self._registry_lock = threading.Lock()
        self._seed_source = random.Random(seed) if seed is not None else None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GameSessionManager:
        settings = settings or get_settings()
        return cls(seed=settings.random_seed)

    # -- Lifecycle -----------------------------------------------------------

    def create_session(
        self,
        config: GameConfig,
        session_id: str | None = None,
        on_event: EventCallback | None = None,
    ) -> str:
        """
        Create a new game.

        Args:
            config: Table configuration
            session_id: Optional id (random when omitted)
            on_event: Optional first subscriber; it also receives SESSION_CREATED

        Returns:
            The session id

        Raises:
            ValueError: If session_id is already in use
        """
        session_id = session_id or secrets.token_hex(4)
        with self._registry_lock:
            if session_id in self._sessions:
                raise ValueError(f"Session {session_id} already exists.")
            rng = None
            if self._seed_source is not None:
                rng = random.Random(self._seed_source.getrandbits(64))
            engine = ShipCaptainCrewEngine.from_config(config, rng=rng)
            session = GameSession(session_id, engine)
            if on_event is not None:
                session.subscribers.append(on_event)
            self._sessions[session_id] = session

        logger.info(
            "Created session %s (%d players, %d dice)",
            session_id, config.num_players, config.num_dice,
        )
        self._publish(session, EventPayload(
            GameEvent.SESSION_CREATED,
            session_id,
            data={"num_players": config.num_players},
        ))
        return session_id

    def close_session(self, session_id: str) -> None:
        """Remove a session. Its subscribers get a final SESSION_CLOSED event."""
        session = self._get(session_id)
        self._publish(session, EventPayload(GameEvent.SESSION_CLOSED, session_id))
        with self._registry_lock:
            self._sessions.pop(session_id, None)
        with session.lock:
            session.subscribers.clear()
        logger.info("Closed session %s", session_id)

    def list_sessions(self) -> list[str]:
        with self._registry_lock:
            return list(self._sessions)

    @contextmanager
    def session(self, session_id: str) -> Iterator[ShipCaptainCrewEngine]:
        """Hold the session lock and yield its engine."""
        session = self._get(session_id)
        with session.lock:
            yield session.engine

    def get_snapshot(self, session_id: str) -> GameSnapshot:
        with self.session(session_id) as engine:
            return GameSnapshot.from_engine(session_id, engine)

    # -- Events --------------------------------------------------------------

    def subscribe(self, session_id: str, on_event: EventCallback) -> None:
        session = self._get(session_id)
        with session.lock:
            session.subscribers.append(on_event)

    def unsubscribe(self, session_id: str, on_event: EventCallback) -> None:
        session = self._get(session_id)
        with session.lock:
            if on_event in session.subscribers:
                session.subscribers.remove(on_event)

    def publish(self, payload: EventPayload) -> None:
        """Deliver an event to every subscriber of its session."""
        self._publish(self._get(payload.session_id), payload)

    def _publish(self, session: GameSession, payload: EventPayload) -> None:
        """Deliver to the given session's subscribers, registered or not."""
        with session.lock:
            callbacks = list(session.subscribers)
        for callback in callbacks:
            try:
                callback(payload)
            except Exception:
                logger.exception(
                    "Error delivering %s for session %s",
                    payload.event.name, payload.session_id,
                )

    # -- Commands ------------------------------------------------------------
    # Each command looks its session up once, mutates the engine under the
    # session lock, then delivers events to that same session object.

    def roll(self, session_id: str, values: Sequence[int] | None = None) -> tuple[int, ...]:
        """Roll for the current player if they have rolls left.

        Returns:
            Dice values after the roll, or () if the player is out of rolls
        """
        session = self._get(session_id)
        with session.lock:
            engine = session.engine
            if not engine.can_current_player_roll():
                return ()
            dice = engine.roll_dice(values)
            player_number = engine.current_player_number
            rolls_used = engine.current_player_rolls_used
        self._publish(session, EventPayload(
            GameEvent.DICE_ROLLED,
            session_id,
            player_number,
            {"dice": list(dice), "rolls_used": rolls_used},
        ))
        return dice

    def auto_hold(self, session_id: str, face_value: int) -> bool:
        session = self._get(session_id)
        with session.lock:
            held = session.engine.auto_hold(face_value)
            player_number = session.engine.current_player_number
        if held:
            self._publish(session, EventPayload(
                GameEvent.DIE_HELD, session_id, player_number, {"face_value": face_value}
            ))
        return held

    def hold(self, session_id: str, die_number: int) -> None:
        """Hold a die by number; DieNotFound propagates to the caller."""
        session = self._get(session_id)
        with session.lock:
            session.engine.hold_by_die_number(die_number)
            player_number = session.engine.current_player_number
        self._publish(session, EventPayload(
            GameEvent.DIE_HELD, session_id, player_number, {"die_number": die_number}
        ))

    def end_turn(self, session_id: str) -> bool:
        """
        Score the current player, release the dice and pass the turn.

        Returns:
            True if another player is up, False if the round is over
        """
        session = self._get(session_id)
        with session.lock:
            engine = session.engine
            player_number = engine.current_player_number
            points = engine.score_current_player()
            engine.reset_dice()
            advanced = engine.advance_to_next_player()
            next_player = engine.current_player_number

        self._publish(session, EventPayload(
            GameEvent.PLAYER_SCORED, session_id, player_number, {"points": points}
        ))
        if advanced:
            self._publish(session, EventPayload(GameEvent.TURN_ADVANCED, session_id, next_player))
        return advanced

    def finish_round(self, session_id: str) -> RoundResult:
        """Finalize the round and start the next one."""
        session = self._get(session_id)
        with session.lock:
            engine = session.engine
            result = engine.finalize_round()
            engine.reset_dice()
            engine.start_new_round()
            first_player = engine.current_player_number

        self._publish(session, EventPayload(
            GameEvent.ROUND_FINALIZED,
            session_id,
            data={"winners": list(result.winners), "top_score": result.top_score},
        ))
        self._publish(session, EventPayload(GameEvent.ROUND_STARTED, session_id, first_player))
        return result

    # -- Internals -----------------------------------------------------------

    def _get(self, session_id: str) -> GameSession:
        with self._registry_lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session
