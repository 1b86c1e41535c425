"""Tests for the file HTTP endpoints."""

MISSING_ID = '507f1f77bcf86cd799439011'


def test_create_and_list_files(client, folder_crud):
    """Test creating root and child files, then listing them."""
    docs = folder_crud.seed('docs')

    response = client.post('/v1/files', json={'name': 'a.txt'})
    assert response.status_code == 200
    assert response.json()['message'] == 'File successfully created.'

    response = client.post('/v1/files', json={'name': 'a.txt', 'level': 'child', 'parent': str(docs.id)})
    assert response.status_code == 200

    response = client.get('/v1/files')
    assert response.status_code == 200
    files = response.json()['data']['files']
    assert len(files) == 2
    assert {f['level'] for f in files} == {'root', 'child'}


def test_create_duplicate_file(client, file_crud):
    """Test duplicate file names in one directory are a 400."""
    file_crud.seed('a.txt')

    response = client.post('/v1/files', json={'name': 'a.txt'})

    assert response.status_code == 400
    assert response.json()['error'] == 'A file with this name already exists in this directory'


def test_create_file_unknown_parent(client):
    """Test an unknown parent is a 400."""
    response = client.post('/v1/files', json={'name': 'a.txt', 'level': 'child', 'parent': MISSING_ID})

    assert response.status_code == 400
    assert response.json()['error'] == 'Invalid parent ID provided.'


def test_put_file_renames(client, file_crud):
    """Test PUT on a file renames it instead of deleting it."""
    a = file_crud.seed('a.txt')

    response = client.put(f'/v1/file/{a.id}', json={'name': 'b.txt'})

    assert response.status_code == 200
    assert response.json()['message'] == 'File successfully edited'
    assert file_crud.names() == ['b.txt']


def test_put_file_not_found(client):
    """Test renaming an unknown file is a 404."""
    response = client.put(f'/v1/file/{MISSING_ID}', json={'name': 'b.txt'})

    assert response.status_code == 404
    assert response.json()['error'] == 'Could not find file.'


def test_delete_file(client, file_crud):
    """Test DELETE removes only that file."""
    a = file_crud.seed('a.txt')
    file_crud.seed('b.txt')

    response = client.delete(f'/v1/file/{a.id}')

    assert response.status_code == 200
    assert response.json()['message'] == 'File successfully deleted'
    assert file_crud.names() == ['b.txt']


def test_delete_file_not_found(client, file_crud):
    """Test deleting an unknown file is a 404."""
    file_crud.seed('a.txt')

    response = client.delete(f'/v1/file/{MISSING_ID}')

    assert response.status_code == 404
    assert file_crud.names() == ['a.txt']
