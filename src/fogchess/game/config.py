"""Game configuration record."""

from __future__ import annotations

from dataclasses import dataclass

from fogchess.core.scenarios import UnknownScenarioError, scenario_names


@dataclass
class GameConfig:
    """Everything needed to start a session.

    ``scenario=None`` is the standard layout.  An unknown scenario name is
    rejected here, at construction, with :class:`UnknownScenarioError`.
    """

    scenario: str | None = None
    fog: bool = True
    single_player: bool = False

    def __post_init__(self) -> None:
        if self.scenario is not None and self.scenario not in scenario_names():
            raise UnknownScenarioError(self.scenario)

    @classmethod
    def for_scenario(cls, name: str, *, fog: bool = True) -> GameConfig:
        """Test-scenario config; turns never alternate in scenario mode."""
        return cls(scenario=name, fog=fog, single_player=True)
