from __future__ import annotations

import logging
import os
import random
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    BOARD_SIZE,
    Board,
    Card,
    ElevensRules,
    IllegalSelection,
    Rank,
    Suit,
    apply_selection,
    available_moves,
    deal_elevens_board,
    game_phase,
    hint,
    play_out,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------- JSON <-> board ----------

def card_to_json(card: Optional[Card]) -> Optional[Dict[str, Any]]:
    if card is None:
        return None
    return {"rank": card.rank.name, "suit": card.suit.name, "faceUp": bool(card.face_up)}


def card_from_json(obj: Optional[Dict[str, Any]], face_up: Optional[bool] = None) -> Optional[Card]:
    if obj is None:
        return None
    try:
        rank = Rank[str(obj["rank"]).upper()]
        suit = Suit[str(obj["suit"]).upper()]
    except KeyError as e:
        raise ValueError(f"unknown card field {e}") from e
    up = bool(obj.get("faceUp", True)) if face_up is None else face_up
    return Card(rank, suit, face_up=up)


def board_to_json(b: Board) -> Dict[str, Any]:
    """Captures a board through its query surface: every slot plus the remaining deck."""
    return {
        "slots": [card_to_json(b.card_at(i)) for i in range(b.size())],
        "deck": [card_to_json(c) for c in b.deck_cards()],
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    slots = obj["slots"]
    if not isinstance(slots, list) or len(slots) != BOARD_SIZE:
        raise ValueError(f"expected {BOARD_SIZE} slots")
    # Cards waiting in the deck are always face down
    deck = [card_from_json(c, face_up=False) for c in obj.get("deck", [])]
    if any(c is None for c in deck):
        raise ValueError("deck cannot contain empty entries")
    return Board.restore(ElevensRules(), [card_from_json(c) for c in slots], deck)


def _moves_to_json(b: Board) -> List[List[int]]:
    return [list(m) for m in available_moves(b)]


def _state_response(b: Board, **extra: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "ok": True,
        "state": board_to_json(b),
        "moves": _moves_to_json(b),
        "phase": game_phase(b).value,
    }
    out.update(extra)
    return out


def _parse_selection(raw: Any) -> List[int]:
    if not isinstance(raw, list):
        raise ValueError("selection must be a list of slot indices")
    if any(not isinstance(x, int) or isinstance(x, bool) for x in raw):
        raise ValueError("selection entries must be integer slot indices")
    return list(raw)


def _load_state(body: Dict[str, Any]) -> Board:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    return board_from_json(s_in)


def _bad_request(e: Exception) -> Any:
    logger.info("rejected request: %s", e)
    return jsonify({"ok": False, "error": f"bad state: {e}"}), 400


# ---------- API routes ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    seed = body.get("seed", None)
    board = deal_elevens_board(seed=seed)
    return jsonify(_state_response(board))


@app.post("/api/legal")
def api_legal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _load_state(body)
        selection = _parse_selection(body.get("selection"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    return jsonify({"ok": True, "legal": board.is_legal(selection)})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _load_state(body)
        selection = _parse_selection(body.get("selection"))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    try:
        replaced = apply_selection(board, selection)
    except IllegalSelection as e:
        return jsonify({"ok": False, "error": str(e), "moves": _moves_to_json(board)}), 400
    return jsonify(_state_response(board, replaced=replaced))


@app.post("/api/hint")
def api_hint() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    h = hint(board)
    return jsonify({"ok": True, "hint": list(h) if h is not None else None, "moves": _moves_to_json(board)})


@app.post("/api/autoplay")
def api_autoplay() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = _load_state(body)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    seed = body.get("seed", None)
    rng = random.Random(seed) if seed is not None else None
    result = play_out(board, rng=rng)
    return jsonify(_state_response(
        board,
        won=result.won,
        played=[list(m) for m in result.moves],
        cardsLeft=result.cards_left,
    ))


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("ELEVENS_LOG_LEVEL", "INFO").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
