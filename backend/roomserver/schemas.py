from typing import Any, Type, TypeVar

from pydantic import BaseModel, Field, StrictInt, ValidationError

from roomserver.exceptions import InvalidAction
from roomserver.models import RpsChoice


class EventRequest(BaseModel):
    model_config = {
        'populate_by_name': True,
        'extra': 'ignore',
    }


class RoomRequest(EventRequest):
    """room:join, room:startBot, game:reset, rps:join, rps:reset, find:join, find:reset"""

    room_id: str = Field(alias='roomId', min_length=1)


class MoveRequest(RoomRequest):
    index: StrictInt = Field(ge=0, le=8)


class ChooseRequest(RoomRequest):
    choice: RpsChoice


class ClickRequest(RoomRequest):
    num: StrictInt


RequestT = TypeVar('RequestT', bound=EventRequest)


def parse_request(model: Type[RequestT], data: Any) -> RequestT:
    """Validate an event payload; anything malformed becomes an InvalidAction."""
    if not isinstance(data, dict):
        raise InvalidAction(f"payload must be an object, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidAction(f"invalid {model.__name__}: {exc.error_count()} error(s)") from exc
