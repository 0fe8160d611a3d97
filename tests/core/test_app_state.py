"""
test_app_state.py
-----------------
Global screen order.
"""

from src.core.runtime.app_state import AppState, DEFAULT_STATE


def test_title_is_the_default_state():
    assert DEFAULT_STATE is AppState.TITLE


def test_states_form_a_linear_chain():
    chain = [AppState.TITLE]
    while chain[-1].next is not None:
        chain.append(chain[-1].next)

    assert chain == [
        AppState.TITLE,
        AppState.MAIN_MENU,
        AppState.GAME,
        AppState.PAUSE,
        AppState.END,
    ]
