from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SendMode(Enum):
    NEW_CASE = "NewCase"
    ATTACH_TO_CASE = "AttachToCase"
    NEW_EMAIL = "NewEmail"
    REPLY_TO_CASE = "ReplyToCase"

    @property
    def is_case_bound(self) -> bool:
        return self in (SendMode.ATTACH_TO_CASE, SendMode.REPLY_TO_CASE)


class Result(Enum):
    SUCCESS = "Success"
    CANCELED = "Canceled"
    FAILED = "Failed"


@dataclass
class OutputConfig:
    name: str
    url: str
    last_case_id: int = 1


@dataclass
class SendRequest:
    url: str
    case_id: int
    mode: SendMode


@dataclass
class SendResult:
    result: Result
    message: Optional[str] = None
    output: Optional[OutputConfig] = None  # only set when the host should remember a new case id

    @classmethod
    def success(cls, output: Optional[OutputConfig] = None) -> "SendResult":
        return cls(Result.SUCCESS, output=output)

    @classmethod
    def canceled(cls) -> "SendResult":
        return cls(Result.CANCELED)

    @classmethod
    def failed(cls, message: str) -> "SendResult":
        return cls(Result.FAILED, message=message)
