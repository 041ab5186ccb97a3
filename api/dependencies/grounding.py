from ai.grounding import GroundingEnforcer


def get_grounding_enforcer() -> GroundingEnforcer:
    """Get the grounding enforcer.

    Returns:
        The grounding enforcer.

    """
    return GroundingEnforcer()
