class PlayerDied(Exception):
    """Raised by the domain when the player touches an obstacle and the run is over."""
