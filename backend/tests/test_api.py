from conftest import NAMESPACE


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    data = res.get_json()
    assert data['namespace'] == NAMESPACE
    assert data['active_rooms'] == 0


def test_room_summary(client, sio_client, connect):
    sio_client.emit('createRoom', {'roomCode': '4242', 'nickname': '출제자', 'word': '사과'}, namespace=NAMESPACE)
    guest = connect()
    guest.emit('joinRoom', {'roomCode': '4242', 'nickname': 'G1'}, namespace=NAMESPACE)

    res = client.get('/api/rooms/4242')
    assert res.status_code == 200
    data = res.get_json()
    assert data['roomCode'] == '4242'
    assert data['hostName'] == '출제자'
    assert data['players'] == ['G1']
    assert data['questionCount'] == 0
    assert data['questionLimit'] == 20
    assert data['waitingForAnswer'] is None
    assert '사과' not in res.get_data(as_text=True)
    assert client.get('/').get_json()['active_rooms'] == 1


def test_unknown_room(client):
    res = client.get('/api/rooms/0000')
    assert res.status_code == 404
    assert 'error' in res.get_json()


def test_chosung_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['chosung', '사과'])
    assert result.exit_code == 0
    assert result.output.strip() == 'ㅅㄱ'
