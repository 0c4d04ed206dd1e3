"""Tests for lobby request parsing and serialization."""

import json

import pytest

from lobby import LobbyRequest, ValidationError


class TestLobbyRequest:
    def test_to_dict_puts_identity_fields_first(self):
        request = LobbyRequest.from_dict({"region": "eu", "lobbyName": "duel-1", "referenceID": "r1", "players": 4})

        assert list(request.to_dict()) == ["referenceID", "lobbyName", "region", "players"]
        assert json.loads(request.to_json()) == {
            "referenceID": "r1", "lobbyName": "duel-1", "region": "eu", "players": 4
        }

    @pytest.mark.parametrize("reference_id,name", [("", "n"), ("r1", "  "), (3, "n"), ("r1", None)])
    def test_direct_construction_is_validated(self, reference_id, name):
        with pytest.raises(ValidationError):
            LobbyRequest(reference_id=reference_id, lobby_name=name)
