# devconnector/utils/test_embedded.py
from devconnector.utils.embedded import prepend, find_by_key, remove_by_key


def test_prepend_puts_newest_first_without_mutating():
    entries = [{'id': 'a'}]
    result = prepend(entries, {'id': 'b'})
    assert [e['id'] for e in result] == ['b', 'a']
    assert entries == [{'id': 'a'}]


def test_prepend_to_missing_list():
    assert prepend(None, {'id': 'a'}) == [{'id': 'a'}]


def test_find_by_key():
    entries = [{'id': 'a', 'v': 1}, {'id': 'b', 'v': 2}]
    assert find_by_key(entries, 'id', 'b') == {'id': 'b', 'v': 2}
    assert find_by_key(entries, 'id', 'z') is None
    assert find_by_key(None, 'id', 'a') is None


def test_remove_by_key_removes_only_first_match():
    entries = [{'id': 'a'}, {'id': 'b'}, {'id': 'b'}]
    remaining, removed = remove_by_key(entries, 'id', 'b')
    assert removed is True
    assert remaining == [{'id': 'a'}, {'id': 'b'}]


def test_remove_by_key_missing_id_is_noop():
    """없는 id를 삭제하면 아무 항목도 제거하지 않음"""
    entries = [{'id': 'a'}, {'id': 'b'}]
    remaining, removed = remove_by_key(entries, 'id', 'zzz')
    assert removed is False
    assert remaining == entries
