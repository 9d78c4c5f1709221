from pydantic import BaseModel, ConfigDict


class DeliveryOutcome(BaseModel):
    """Normalized result of sending a payload through any channel"""
    model_config = ConfigDict(frozen=True)

    delivered: bool
    message: str

    @classmethod
    def success(cls, message: str) -> "DeliveryOutcome":
        return cls(delivered=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "DeliveryOutcome":
        return cls(delivered=False, message=message)
