"""Screen bodies for the manual router.

This project uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each screen body is a function taking `(ctx, session)`:
`ctx` is the `ScreenContext` built by the navigation controller (transition
callables plus role flags) and `session` gives read access to the API
client and auth state. Views never change navigation state directly.

Add a new screen to `domain.screens.Screen`, give it an entry in
`domain.registry.SCREEN_REGISTRY`, and map it to its body in `SCREEN_VIEWS`
inside `app.py`.
"""
