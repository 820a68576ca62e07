from roomserver.models import Mark, RpsChoice


def test_disconnect_cleans_every_game(rooms, transport, disconnect):
    rooms.tictactoe.join('shared', 'alice')
    rooms.tictactoe.join('shared', 'bob')
    rooms.rps.join('shared', 'alice')
    rooms.rps.join('shared', 'bob')
    rooms.find_number.join('shared', 'alice')
    rooms.rps.choose('shared', 'alice', RpsChoice.ROCK)
    transport.clear()

    disconnect('alice')

    assert [p.id for p in rooms.tictactoe.store.get('shared').players] == ['bob']
    assert [p.id for p in rooms.rps.store.get('shared').players] == ['bob']
    assert rooms.rps.store.get('shared').choices == {}
    assert 'shared' not in rooms.find_number.store
    assert transport.events('bob') == ['game:update', 'rps:update']
    assert transport.received('alice') == []


def test_same_room_id_does_not_cross_games(rooms, transport):
    rooms.tictactoe.join('r1', 'alice')
    rooms.rps.join('r1', 'bob')
    transport.clear()

    rooms.tictactoe.move('r1', 'alice', 0)
    assert transport.events('alice') == ['game:update']
    assert transport.events('bob') == []


def test_disconnect_of_a_stranger_is_harmless(rooms, transport, disconnect):
    rooms.tictactoe.join('r1', 'alice')
    transport.clear()
    disconnect('ghost')
    assert transport.log == []
    assert rooms.room_counts() == {'ttt': 1, 'rps': 0, 'find': 0}


def test_room_counts_keep_bot_rooms(rooms, disconnect):
    rooms.tictactoe.join('plain', 'alice')
    rooms.tictactoe.join('bot', 'alice')
    rooms.tictactoe.start_bot('bot')
    rooms.rps.join('rps', 'alice')
    assert rooms.room_counts() == {'ttt': 2, 'rps': 1, 'find': 0}

    disconnect('alice')
    assert rooms.room_counts() == {'ttt': 1, 'rps': 0, 'find': 0}
    assert rooms.tictactoe.store.get('bot').turn == Mark.X
