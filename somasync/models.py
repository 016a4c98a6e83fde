import datetime
import enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SessionType(str, enum.Enum):
    INITIAL = "initial"
    FOLLOWUP = "followup"
    MAINTENANCE = "maintenance"


class SessionStatus(str, enum.Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class Finding(BaseModel):
    """A single clinical utterance captured during a session."""
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: int = Field(ge=0)  # milliseconds from session start
    text: str
    created_at: datetime.datetime

    @field_validator("text")
    @classmethod
    def _check_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("finding text must not be blank")
        return value


class ParsedVoiceCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str | None = None  # command label, None for plain speech
    text: str
    is_command: bool


class SOAPNote(BaseModel):
    model_config = ConfigDict(frozen=True)

    subjective: str
    objective: str
    assessment: str
    plan: str


class TranscriptionState(BaseModel):
    """Live transcription status owned by the session-control layer."""
    model_config = ConfigDict(frozen=True)

    is_transcribing: bool = False
    current_transcript: str = ""
    full_transcript: str = ""
    last_command: ParsedVoiceCommand | None = None
    command_count: int = 0
    error: str | None = None


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    client_name: str
    session_type: SessionType
    status: SessionStatus = SessionStatus.ACTIVE
    start_time: datetime.datetime
    end_time: datetime.datetime | None = None
    duration: int = Field(default=0, ge=0)  # seconds
    findings: tuple[Finding, ...] = ()
    soap_note: SOAPNote | None = None
    audio_file_uri: str | None = None
    notes: str | None = None

    def add_finding(self, finding: Finding) -> "Session":
        return self.model_copy(update={"findings": self.findings + (finding,)})


class SessionSummary(BaseModel):
    """Lightweight listing row for the history view."""
    model_config = ConfigDict(frozen=True)

    id: str
    client_name: str
    session_type: SessionType
    date: datetime.datetime
    duration: int
    findings_count: int
