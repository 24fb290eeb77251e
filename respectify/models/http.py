"""Raw HTTP response model exchanged between transport and interpreter."""

from pydantic import BaseModel, ConfigDict


class RawResponse(BaseModel):
    """Status line and body of a response, as received from the transport."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    reason_phrase: str = ""
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status_code < 300
