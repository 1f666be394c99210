"""
Tests for commit listing, filtering, ordering and lookup.
"""

import logging
from unittest.mock import Mock

import pytest

from s3web.domain import Location, Tag
from s3web.errors import RemoteResponseError, TransportError
from s3web.infra import MetadataClient
from s3web.services import CommitService, parse_metadata, sort_commits
from s3web.services.commit_service import valid_commits

LOCATION = Location("host", "/path")

METADATA = b"""
{"id": "one", "properties": {"timestamp": "2019-09-20T13:45:36Z"}}
{"id": "two", "properties": {"timestamp": "2019-09-20T13:45:37Z"}}"""


def make_service(data=None, error=None):
    client = Mock(spec=MetadataClient)
    if error is not None:
        client.fetch.side_effect = error
    else:
        client.fetch.return_value = data
    return CommitService(client=client), client


def ids(commits):
    return [commit.id for commit in commits]


class TestParseMetadata:
    """Tests for line-by-line decoding."""

    def test_blank_lines_skipped(self):
        results = list(parse_metadata("\n  \n{\"id\": \"a\", \"properties\": {}}\n\n"))
        assert len(results) == 1
        assert results[0].line_number == 3

    def test_crlf(self):
        data = b'{"id": "a", "properties": {}}\r\n{"id": "b", "properties": {}}\r\n'
        assert ids(valid_commits(parse_metadata(data))) == ["a", "b"]

    def test_invalid_line_reported(self):
        results = list(parse_metadata('foo\n{"id": "a", "properties": {}}'))
        assert [r.ok for r in results] == [False, True]
        assert results[0].line_number == 1

    def test_invalid_utf8_spoils_only_its_line(self):
        data = b'\xff\xfe garbage\n{"id": "ok", "properties": {}}'
        assert ids(valid_commits(parse_metadata(data))) == ["ok"]

    def test_unicode_line_separator_inside_string(self):
        data = '{"id": "a", "properties": {"note": "x\u2028y"}}'.encode("utf-8")
        commits = list(valid_commits(parse_metadata(data)))
        assert commits[0].properties["note"] == "x\u2028y"

    def test_is_lazy(self):
        results = parse_metadata("foo\nbar")
        assert next(results).line_number == 1

    def test_skipped_lines_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="s3web.services.commit_service")
        list(valid_commits(parse_metadata('{"id": "a", "properties": {}}\nfoo')))
        assert "Skipping metadata line 2" in caplog.text


class TestSortCommits:
    """Tests for newest-first ordering."""

    def _commits(self, *pairs):
        data = "\n".join(
            '{"id": "%s", "properties": %s}' % (
                cid, '{"timestamp": "%s"}' % ts if ts else "{}")
            for cid, ts in pairs
        )
        return list(valid_commits(parse_metadata(data)))

    def test_descending(self):
        commits = self._commits(
            ("t1", "2019-09-20T13:45:36Z"),
            ("t3", "2019-09-20T13:45:38Z"),
            ("t2", "2019-09-20T13:45:37Z"),
        )
        assert ids(sort_commits(commits)) == ["t3", "t2", "t1"]

    def test_missing_timestamps_last_in_input_order(self):
        commits = self._commits(
            ("a", None),
            ("b", "2019-09-20T13:45:36Z"),
            ("c", "not a timestamp"),
            ("d", "2019-09-20T13:45:37Z"),
            ("e", "2019-09-20T13:45:37Z"),
        )
        assert ids(sort_commits(commits)) == ["d", "e", "b", "a", "c"]

    def test_offsets_compared_as_instants(self):
        commits = self._commits(
            ("later", "2019-09-20T13:45:37Z"),
            ("earlier", "2019-09-20T15:45:36+02:00"),
        )
        assert ids(sort_commits(commits)) == ["later", "earlier"]

    def test_microsecond_apart_far_future(self):
        commits = self._commits(
            ("older", "9999-12-31T23:59:59.999998Z"),
            ("newer", "9999-12-31T23:59:59.999999Z"),
        )
        assert ids(sort_commits(commits)) == ["newer", "older"]

    def test_deterministic(self):
        commits = self._commits(("a", None), ("b", None), ("c", "2019-09-20T13:45:36Z"))
        assert ids(sort_commits(commits)) == ids(sort_commits(commits)) == ["c", "a", "b"]

    def test_empty(self):
        assert sort_commits([]) == []


class TestListCommits:
    """Tests for CommitService.list_commits."""

    def test_list_commits(self):
        service, client = make_service(METADATA)
        commits = service.list_commits(LOCATION, [])

        assert ids(commits) == ["two", "one"]
        client.fetch.assert_called_once_with(LOCATION)

    def test_not_found(self):
        service, _ = make_service(None)
        assert service.list_commits(LOCATION) == []

    def test_empty_document(self):
        service, _ = make_service(b"")
        assert service.list_commits(LOCATION) == []

    def test_all_lines_invalid(self):
        service, _ = make_service(b"foo\n[]\n{}")
        assert service.list_commits(LOCATION) == []

    def test_invalid_line_skipped(self):
        data = b'\nfoo\n{"id": "two", "properties": {"timestamp": "2019-09-20T13:45:37Z"}}'
        service, _ = make_service(data)
        commits = service.list_commits(LOCATION)

        assert ids(commits) == ["two"]

    def test_deeply_nested_line_skipped(self):
        nested = b'{"id": "bad", "properties": {"x": ' + b"[" * 100000 + b"]" * 100000 + b"}}"
        service, _ = make_service(nested + b'\n{"id": "ok", "properties": {}}')
        assert ids(service.list_commits(LOCATION)) == ["ok"]

    def test_tags(self):
        data = b"""
{"id": "one", "properties": {"timestamp": "2019-09-20T13:45:36Z", "tags": { "a": "b" }}}
{"id": "two", "properties": {"timestamp": "2019-09-20T13:45:37Z", "tags": { "c": "d" }}}"""
        service, _ = make_service(data)

        assert ids(service.list_commits(LOCATION, [Tag("a")])) == ["one"]
        assert ids(service.list_commits(LOCATION, [Tag("c", "d")])) == ["two"]
        assert ids(service.list_commits(LOCATION, [Tag("c", "x")])) == []
        assert ids(service.list_commits(LOCATION, [])) == ["two", "one"]

    def test_tags_skip_untagged_commits(self):
        data = b"""
{"id": "one", "properties": {"tags": {"a": "b"}}}
{"id": "two", "properties": {}}"""
        service, _ = make_service(data)
        assert ids(service.list_commits(LOCATION, [Tag("a")])) == ["one"]

    def test_tags_accept_generator(self):
        service, _ = make_service(b'{"id": "one", "properties": {"tags": {"a": "b"}}}')
        assert ids(service.list_commits(LOCATION, (Tag(k) for k in ["a"]))) == ["one"]

    def test_refetches_every_call(self):
        service, client = make_service(METADATA)
        service.list_commits(LOCATION)
        service.list_commits(LOCATION)
        assert client.fetch.call_count == 2

    def test_transport_error_propagates(self):
        error = TransportError("http://host/path/titan")
        service, _ = make_service(error=error)

        with pytest.raises(TransportError) as exc_info:
            service.list_commits(LOCATION)
        assert exc_info.value is error

    def test_remote_error_propagates(self):
        error = RemoteResponseError("http://host/path/titan", 400, "bad request")
        service, _ = make_service(error=error)

        with pytest.raises(RemoteResponseError) as exc_info:
            service.list_commits(LOCATION)
        assert exc_info.value is error


class TestGetCommit:
    """Tests for CommitService.get_commit."""

    def test_get_commit(self):
        service, _ = make_service(METADATA)
        commit = service.get_commit(LOCATION, "one")

        assert commit.id == "one"
        assert commit.properties["timestamp"] == "2019-09-20T13:45:36Z"

    def test_get_missing_commit(self):
        service, _ = make_service(METADATA)
        assert service.get_commit(LOCATION, "three") is None

    def test_get_commit_no_document(self):
        service, _ = make_service(None)
        assert service.get_commit(LOCATION, "one") is None

    def test_get_commit_newest_duplicate_wins(self):
        data = b"""
{"id": "dup", "properties": {"timestamp": "2019-09-20T13:45:36Z", "n": 1}}
{"id": "dup", "properties": {"timestamp": "2019-09-20T13:45:37Z", "n": 2}}"""
        service, _ = make_service(data)
        assert service.get_commit(LOCATION, "dup").properties["n"] == 2

    def test_get_commit_error(self):
        error = RemoteResponseError("http://host/path/titan", 400, "bad request")
        service, _ = make_service(error=error)

        with pytest.raises(RemoteResponseError):
            service.get_commit(LOCATION, "id")
