"""
Core board logic (transport-agnostic).

Components:
- ports.py: Protocols and the response envelope shared with the API client
- state.py: BoardState + pure reducers
- board.py: TaskBoard controller (actions, refresh-after-mutation, message timer)
"""
