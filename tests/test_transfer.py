"""
Import/export document tests.
"""

import json

import pytest

from correlativas.schemas import ProgressState
from correlativas.tracker import ImportRejected, export_state, import_state
from correlativas.tracker.transfer import FORMAT_ERROR_MESSAGE, READ_ERROR_MESSAGE


class TestExport:

    def test_export_uses_string_keys(self):
        document = json.loads(export_state(ProgressState(taken={1: True, 3: False})))
        assert document == {"taken": {"1": True, "3": False}, "passed": {}}

    @pytest.mark.parametrize("state", [
        ProgressState(),
        ProgressState(taken={1: True}),
        ProgressState(taken={1: True, 2: False, 10: True}, passed={1: True, 2: False}),
    ])
    def test_import_of_export_is_identity(self, state):
        assert import_state(export_state(state)) == state


class TestImport:

    def test_accepts_bytes(self):
        state = import_state(b'{"taken": {"4": true}, "passed": {"4": true}}')
        assert state.is_passed(4)

    def test_accepts_utf8_bom(self):
        state = import_state('\ufeff{"taken": {}, "passed": {}}'.encode("utf-8"))
        assert state == ProgressState()

    def test_accepts_legacy_field_names(self):
        state = import_state('{"cursadas": {"2": true}, "aprobadas": {}}')
        assert state.is_taken(2)

    def test_inner_values_not_strictly_typed(self):
        state = import_state('{"taken": {"1": "si", "x": true}, "passed": {"1": 0}}')
        assert state.taken == {1: True}
        assert state.passed == {1: False}

    def test_non_canonical_keys_dropped(self):
        state = import_state('{"taken": {"1": true, "01": false, "+1": false}, "passed": {" 2": true}}')
        assert state.taken == {1: True}
        assert state.passed == {}

    def test_rejects_missing_passed(self):
        with pytest.raises(ImportRejected) as exc_info:
            import_state('{"taken": {"1": true}}')
        assert exc_info.value.message == FORMAT_ERROR_MESSAGE

    def test_rejects_missing_taken(self):
        with pytest.raises(ImportRejected):
            import_state('{"passed": {}}')

    def test_rejects_null_field(self):
        with pytest.raises(ImportRejected):
            import_state('{"taken": null, "passed": {}}')

    def test_rejects_non_object_document(self):
        with pytest.raises(ImportRejected) as exc_info:
            import_state("[1, 2]")
        assert exc_info.value.message == FORMAT_ERROR_MESSAGE

    def test_rejects_invalid_json(self):
        with pytest.raises(ImportRejected) as exc_info:
            import_state("{taken: }")
        assert exc_info.value.message == READ_ERROR_MESSAGE

    def test_rejects_invalid_utf8(self):
        with pytest.raises(ImportRejected) as exc_info:
            import_state(b"\xff\xfe\x00garbage")
        assert exc_info.value.message == READ_ERROR_MESSAGE
