import pytest

from roomserver.exceptions import InvalidAction
from roomserver.models import RpsChoice
from roomserver.schemas import ChooseRequest, ClickRequest, MoveRequest, RoomRequest, parse_request


def test_room_request_reads_the_wire_name():
    req = parse_request(RoomRequest, {'roomId': 'r1', 'extra': True})
    assert req.room_id == 'r1'


@pytest.mark.parametrize('payload', [None, 'r1', ['r1'], {}, {'roomId': ''}, {'roomId': 7}])
def test_room_request_rejects_bad_payloads(payload):
    with pytest.raises(InvalidAction):
        parse_request(RoomRequest, payload)


def test_move_request_bounds():
    assert parse_request(MoveRequest, {'roomId': 'r1', 'index': 8}).index == 8
    for index in (-1, 9, '3', 1.5, None):
        with pytest.raises(InvalidAction):
            parse_request(MoveRequest, {'roomId': 'r1', 'index': index})


def test_choose_request_only_takes_known_choices():
    assert parse_request(ChooseRequest, {'roomId': 'r2', 'choice': 'Paper'}).choice == RpsChoice.PAPER
    for choice in ('paper', 'Lizard', None, 1):
        with pytest.raises(InvalidAction):
            parse_request(ChooseRequest, {'roomId': 'r2', 'choice': choice})


def test_click_request_needs_an_integer():
    assert parse_request(ClickRequest, {'roomId': 'f1', 'num': 3}).num == 3
    with pytest.raises(InvalidAction):
        parse_request(ClickRequest, {'roomId': 'f1', 'num': '3'})
    with pytest.raises(InvalidAction):
        parse_request(ClickRequest, {'roomId': 'f1'})
