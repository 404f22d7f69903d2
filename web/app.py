import os
import sys
import threading
from flask import Flask, jsonify, request

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from checkers_engine.board import DEFAULT_SIDE
from checkers_engine.errors import CheckersError
from checkers_engine.game import CheckersGame
from checkers_common.notation import format_square, parse_square
from checkers_common.render import render_board

app = Flask(__name__)
app.config.setdefault("BOARD_SIDE", DEFAULT_SIDE)

game = CheckersGame(app.config["BOARD_SIDE"])
game_lock = threading.Lock()


def get_board_state():
    side = game.side
    return {
        "side": side,
        "board": game.board.board.tolist(),
        "highlight": game.board.highlight.tolist(),
        "selected": format_square(game.selected, side) if game.selected else None,
        "destinations": [format_square(p, side) for p in game.destinations()],
        "current_player": game.current_player,
        "pieces": {"dark": game.pieces[1], "light": game.pieces[-1]},
        "must_capture": game.must_capture() if not game.done else False,
        "capturing": game.tree.capture if game.tree is not None else False,
        "chain_in_progress": game.chain_in_progress,
        "move_count": game.move_count,
        "game_over": game.done,
        "winner": game.winner,
        "text": render_board(game.board),
    }


def error_response(e: CheckersError):
    return jsonify({"error": type(e).__name__, "message": str(e)}), 400


def requested_square():
    data = request.get_json(silent=True) or {}
    return parse_square(str(data.get("square", "")), game.side)


@app.route('/')
@app.route('/state')
def state():
    with game_lock:
        return jsonify(get_board_state())


@app.route('/new_game', methods=['POST'])
def new_game():
    global game
    data = request.get_json(silent=True) or {}
    try:
        side = int(data.get("side", app.config["BOARD_SIDE"]))
        fresh = CheckersGame(side)
    except (TypeError, ValueError) as e:
        return jsonify({"error": "ValueError", "message": str(e)}), 400
    with game_lock:
        game = fresh
        print(f"New {side}x{side} game")
        return jsonify(get_board_state())


@app.route('/select', methods=['POST'])
def select():
    with game_lock:
        try:
            pos = requested_square()
            if pos is None:
                game.cancel()
            else:
                game.select(pos)
        except CheckersError as e:
            return error_response(e)
        return jsonify(get_board_state())


@app.route('/move', methods=['POST'])
def move():
    with game_lock:
        try:
            pos = requested_square()
            if pos is None:
                return jsonify({"error": "IllegalDestination", "message": "No square given"}), 400
            result = game.choose(pos)
        except CheckersError as e:
            return error_response(e)
        print(f"Executed: {' -> '.join(format_square(p, game.side) for p in result.path)}")
        payload = get_board_state()
        payload["captured"] = [format_square(p, game.side) for p in result.captured]
        payload["promoted"] = result.promoted
        return jsonify(payload)


@app.route('/cancel', methods=['POST'])
def cancel():
    with game_lock:
        try:
            game.cancel()
        except CheckersError as e:
            return error_response(e)
        return jsonify(get_board_state())


if __name__ == '__main__':
    app.run(debug=True, port=5000)
