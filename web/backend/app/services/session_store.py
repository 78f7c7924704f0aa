"""In-memory session management."""

import uuid
from datetime import datetime, timedelta
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from threading import Lock

from pairforge.synthesis import GenerationRequest, GenerationState, Pair

from ..config import settings


@dataclass
class Session:
    """User session data: the current pair collection and its parameters."""
    id: str
    created_at: datetime = field(default_factory=datetime.utcnow)
    pairs: List[Pair] = field(default_factory=list)
    domain: Optional[str] = None
    example_type: Optional[str] = None
    model: Optional[str] = None
    state: GenerationState = GenerationState.IDLE
    generations: int = 0

    @property
    def is_generating(self) -> bool:
        return self.state in (
            GenerationState.GENERATING_INSTRUCTIONS,
            GenerationState.GENERATING_ANSWERS,
        )

    @property
    def is_expired(self) -> bool:
        expiry = self.created_at + timedelta(hours=settings.SESSION_EXPIRY_HOURS)
        return datetime.utcnow() > expiry


class SessionStore:
    """Thread-safe in-memory session store."""

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._lock = Lock()

    def create(self) -> Session:
        """Create a new session."""
        session_id = str(uuid.uuid4())
        session = Session(id=session_id)

        with self._lock:
            self._sessions[session_id] = session
            self._cleanup_expired()

        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Get session by ID."""
        with self._lock:
            session = self._sessions.get(session_id)

            if session and session.is_expired and not session.is_generating:
                del self._sessions[session_id]
                return None

            return session

    def get_or_create(self, session_id: Optional[str]) -> Session:
        """Get existing session or create new one."""
        if session_id:
            session = self.get(session_id)
            if session:
                return session

        return self.create()

    def begin_generation(self, session_id: str) -> bool:
        """Mark a run as in flight. Returns False if one already is."""
        with self._lock:
            session = self._sessions.get(session_id)
            if not session or session.is_generating:
                return False

            session.state = GenerationState.GENERATING_INSTRUCTIONS
            return True

    def update_phase(self, session_id: str, state: GenerationState):
        """Record the phase of an in-flight run."""
        if state not in (GenerationState.GENERATING_INSTRUCTIONS, GenerationState.GENERATING_ANSWERS):
            return
        with self._lock:
            session = self._sessions.get(session_id)
            if session and session.is_generating:
                session.state = state

    def complete_generation(self, session_id: str, request: GenerationRequest, pairs: List[Pair]):
        """Replace the collection with the result of a successful run."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session:
                session.pairs = list(pairs)
                session.domain = request.domain
                session.example_type = request.example_type
                session.model = request.model_id
                session.state = GenerationState.COMPLETE
                session.generations += 1

    def fail_generation(self, session_id: str):
        """End a failed run; the previous collection is kept."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session:
                session.state = GenerationState.FAILED

    def update_answer(self, session_id: str, index: int, answer: str) -> Optional[Pair]:
        """Replace one answer. Returns the edited pair, or None if out of range."""
        with self._lock:
            session = self._sessions.get(session_id)
            if not session or not 0 <= index < len(session.pairs):
                return None

            pair = session.pairs[index]
            pair.answer = answer
            return pair

    def snapshot(self, session_id: str) -> Optional[Session]:
        """Copy of a session whose pairs can be read outside the lock."""
        with self._lock:
            session = self._sessions.get(session_id)
            if not session:
                return None
            return Session(
                id=session.id,
                created_at=session.created_at,
                pairs=[Pair(p.instruction, p.answer) for p in session.pairs],
                domain=session.domain,
                example_type=session.example_type,
                model=session.model,
                state=session.state,
                generations=session.generations,
            )

    def _cleanup_expired(self):
        """Remove expired sessions (called within lock)."""
        expired = [
            sid for sid, session in self._sessions.items()
            if session.is_expired and not session.is_generating
        ]
        for sid in expired:
            del self._sessions[sid]

    def stats(self) -> dict:
        """Get store statistics."""
        with self._lock:
            return {
                "total_sessions": len(self._sessions),
                "active_sessions": sum(
                    1 for s in self._sessions.values()
                    if not s.is_expired and s.generations > 0
                ),
                "generating": sum(1 for s in self._sessions.values() if s.is_generating),
            }


# Global session store instance
session_store = SessionStore()
