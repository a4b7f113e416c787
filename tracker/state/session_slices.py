import streamlit as st


PREFIX = "slice"


def _state(state):
    return st.session_state if state is None else state


def get_slice(slice_name, state=None):
    state = _state(state)
    key = f"{PREFIX}.{slice_name}"
    if key not in state:
        state[key] = {}
    return state[key]


def get_value(slice_name, name, default=None, state=None):
    payload = get_slice(slice_name, state)
    return payload.get(name, default)


def set_value(slice_name, name, value, state=None):
    payload = get_slice(slice_name, state)
    payload[name] = value


def pop_value(slice_name, name, default=None, state=None):
    payload = get_slice(slice_name, state)
    return payload.pop(name, default)
