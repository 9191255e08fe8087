from uuid import UUID, uuid4

import pytest

from src.api.models import CreateGameRequest, JoinGameRequest, MoveRequest, WallRequest
from src.core.exceptions import InvalidRequestError


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_create_game_request() -> None:
    request = CreateGameRequest(player_id="1234", player_name="don't hate the player, hate the name.")
    assert request.player_id == "1234"


@pytest.mark.parametrize("player_id, player_name", [("", "name"), ("1234", "   ")])
def test_blank_identity(player_id: str, player_name: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(player_id=player_id, player_name=player_name)


# -- Validation - JoinGameRequest --
@pytest.mark.parametrize("player_id, player_name", [(" ", "Bob"), ("player_2", "")])
def test_blank_identity_on_join(mock_id: UUID, player_id: str, player_name: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = JoinGameRequest(game_id=mock_id, player_id=player_id, player_name=player_name)


# -- Validation - MoveRequest --
def test_valid_cell_name(mock_id: UUID) -> None:
    """Test that MoveRequest accepts correctly written cells in algebraic notation."""
    request = MoveRequest(game_id=mock_id, player_id="bladiblidiboo", to_cell="E2")
    assert request.to_cell == "e2"
    assert request.expected_version is None


@pytest.mark.parametrize(
    "cell",
    [
        "nonsense",  # anything more than two characters.
        "11",  # First character is not a letter
        "aa",  # second character is not a number
        "j5",  # no j-file on a 9x9 board
        "a0",  # rows start at 1
    ],
)
def test_invalid_to_cell(mock_id: UUID, cell: str) -> None:
    """Test that an exception is raised when using invalid cell name."""
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, player_id="bladiblidiboo", to_cell=cell)


# -- Validation - WallRequest --
@pytest.mark.parametrize("wall", ["e3h", "a1v", " D4H "])
def test_valid_wall(mock_id: UUID, wall: str) -> None:
    request = WallRequest(game_id=mock_id, player_id="bladiblidiboo", wall=wall)
    assert request.wall == wall.strip().lower()


@pytest.mark.parametrize("wall", ["e3", "e3x", "e3hv", "k1h"])
def test_invalid_wall(mock_id: UUID, wall: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = WallRequest(game_id=mock_id, player_id="bladiblidiboo", wall=wall)
