"""
Ship, Captain & Crew - Snapshot Models

Pydantic models describing a hosted game at a point in time.
"""

from pydantic import BaseModel, Field

from ship_captain_crew.engine.ship_captain_crew import ShipCaptainCrewEngine


class DieSnapshot(BaseModel):
    die_number: int
    face_value: int = Field(ge=1)
    is_held: bool = False

    model_config = {"from_attributes": True}


class PlayerSnapshot(BaseModel):
    player_number: int = Field(ge=1)
    score: int = 0
    rolls_used: int = 0
    wins: int = 0
    losses: int = 0

    model_config = {"from_attributes": True}


class GameSnapshot(BaseModel):
    """Full state of one session, players in turn order."""

    session_id: str
    max_rolls: int
    current_player_number: int
    turn_counter: int = 0
    phase: str
    players: list[PlayerSnapshot] = Field(default_factory=list)
    dice: list[DieSnapshot] = Field(default_factory=list)

    @classmethod
    def from_engine(cls, session_id: str, engine: ShipCaptainCrewEngine) -> "GameSnapshot":
        return cls(
            session_id=session_id,
            max_rolls=engine.max_rolls,
            current_player_number=engine.current_player_number,
            turn_counter=engine.turn_counter,
            phase=engine.phase.name.lower(),
            players=[
                PlayerSnapshot.model_validate(standing)
                for standing in engine.standings()
            ],
            dice=[DieSnapshot.model_validate(die) for die in engine.dice],
        )
