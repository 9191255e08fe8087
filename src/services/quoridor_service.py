"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JoinGameRequest,
    MoveRequest,
    PlayerResponse,
    ResignRequest,
    ValidMovesRequest,
    ValidMovesResponse,
    WallRequest,
)
from src.core.exceptions import (
    ConcurrentUpdateError,
    GameError,
    RepositoryError,
    UnknownPlayerError,
)
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.quoridor.actions import Action, GameOver, Join, MovePawn, PlaceWall
from src.quoridor.game import apply_action, from_model, new_game, to_model
from src.quoridor.moves import valid_moves
from src.quoridor.notation import (
    position_from_algebraic,
    position_to_algebraic,
    wall_from_notation,
    wall_to_notation,
)
from src.quoridor.pathfinding import shortest_path_length
from src.quoridor.state import GameState

logger = logging.getLogger(__name__)


class QuoridorService:
    """
    Orchestration of layers for Quoridor.

    The service is the single authoritative holder of a game: it reads the stored snapshot, lets the rules engine
    produce the next one and writes it back, refusing the write if the stored snapshot changed in between.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """First player requested to create a new game."""
        game = new_game(player_id=request.player_id, username=request.player_name)
        stored_game, game_id = self.repo.create_game(to_model(game))
        logger.info("Game %s created by %s", game_id, request.player_id)
        return self._create_game_response(game_id, stored_game)

    def join_game(self, request: JoinGameRequest) -> GameResponse:
        """Second player requested to join a game."""
        action = Join(player_id=request.player_id, username=request.player_name)
        response = self._apply(request.game_id, action)
        logger.info("Player %s joined game %s", request.player_id, request.game_id)
        return response

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def valid_moves(self, request: ValidMovesRequest) -> ValidMovesResponse:
        """Cells the player's pawn could step to (for highlighting, not a promise it is your turn)."""
        game = from_model(self._fetch_game(request.game_id))
        if not game.is_player(request.player_id):
            raise UnknownPlayerError(
                f"Player {request.player_id!r} is not part of game {request.game_id}."
            )
        return ValidMovesResponse(
            game_id=request.game_id,
            player_id=request.player_id,
            valid_moves=[
                position_to_algebraic(cell)
                for cell in valid_moves(game, request.player_id)
            ],
        )

    def move_pawn(self, request: MoveRequest) -> GameResponse:
        """Pawn move attempt."""
        action = MovePawn(
            player_id=request.player_id,
            position=position_from_algebraic(request.to_cell),
        )
        return self._apply(request.game_id, action, request.expected_version)

    def place_wall(self, request: WallRequest) -> GameResponse:
        """Wall placement attempt."""
        action = PlaceWall(
            player_id=request.player_id, wall=wall_from_notation(request.wall)
        )
        return self._apply(request.game_id, action, request.expected_version)

    def resign(self, request: ResignRequest) -> GameResponse:
        """The requesting player gives up: the opponent is declared the winner."""
        game = from_model(self._fetch_game(request.game_id))
        opponent = game.opponent(request.player_id)
        if opponent is None:
            raise UnknownPlayerError(
                f"Player {request.player_id!r} has no opponent in game {request.game_id} to resign against."
            )
        action = GameOver(winner_id=opponent.id)
        return self._apply(request.game_id, action, request.expected_version)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Game %s deleted", request.game_id)

    # -- Internal helpers --
    def _apply(
        self, game_id: UUID, action: Action, expected_version: int | None = None
    ) -> GameResponse:
        """
        read --> check version --> let the rules engine apply the action --> write back
        ----

        Rejections from the rules engine are propagated untouched (they carry the violated rule).
        """
        stored_model = self._fetch_game(game_id)
        if expected_version is not None and expected_version != stored_model.version:
            raise ConcurrentUpdateError(
                f"Game {game_id} is at version {stored_model.version}, request was based on version {expected_version}."
            )

        try:
            game = apply_action(from_model(stored_model), action)
        except GameError as error:
            logger.warning(
                "Rejected %s in game %s: %s", type(action).__name__, game_id, error
            )
            raise

        updated_model = self.repo.update_game(
            game_id, to_model(game, version=stored_model.version)
        )
        if updated_model is None:
            raise RepositoryError(f"Game with {game_id=} disappeared while updating.")

        self._log_outcome(game_id, game)
        return self._create_game_response(game_id, updated_model)

    def _log_outcome(self, game_id: UUID, game: GameState) -> None:
        if game.winner is not None:
            logger.info("Game %s finished, winner: %s", game_id, game.winner)
        elif game.moves:
            logger.debug("Game %s: %s played", game_id, game.moves[-1])

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = from_model(model)
        return GameResponse(
            game_id=game_id,
            status=game.status,
            players=[
                PlayerResponse(
                    player_id=player.id,
                    username=player.username,
                    cell=position_to_algebraic(player.position),
                    walls_left=player.walls_left,
                    goal_row=player.goal_row,
                    distance_to_goal=shortest_path_length(game.walls, player.position, player.goal_row),
                )
                for player in game.players
            ],
            current_turn=game.current_turn,
            winner=game.winner,
            walls=[wall_to_notation(wall) for wall in game.walls],
            move_history=list(game.moves),
            version=model.version,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
