"""
Combat manager: the round loop of the cave battle.

Each round every living unit takes one turn in reading order of its square
at round start. On its turn a unit moves one step towards the nearest square
in range of an enemy (unless it is already in range) and then attacks the
weakest adjacent enemy.
"""
from dataclasses import dataclass
from typing import Optional

from ..core.data import FACTION_DATA, Faction, Vector2
from ..core.engine import FightResult, TurnOrder
from .combat_resolver import AttackResult, CombatResolver
from .entities.unit import Unit
from .log_manager import LogManager
from .map import Battlefield
from .pathfinding import path_to_nearest_target


class CombatStalemateError(RuntimeError):
    """Raised when a full round changes nothing while both factions still live."""


@dataclass
class TurnReport:
    """What a unit did on its turn."""
    unit_id: str
    moved_to: Optional[Vector2] = None
    attack: Optional[AttackResult] = None

    @property
    def is_idle(self) -> bool:
        return self.moved_to is None and self.attack is None


class Combat:
    """Runs the battle on a battlefield it mutates in place."""

    def __init__(
        self,
        battlefield: Battlefield,
        elf_attack_power: Optional[int] = None,
        goblin_attack_power: Optional[int] = None,
        log_manager: Optional[LogManager] = None,
    ):
        """Initialize the combat.

        Args:
            battlefield: Battlefield to fight on (mutated by every round)
            elf_attack_power: Override the attack power of every Elf
            goblin_attack_power: Override the attack power of every Goblin
            log_manager: Log to write battle messages to
        """
        self.battlefield = battlefield
        self.log = log_manager or LogManager()
        self.resolver = CombatResolver(battlefield, self.log)

        if elf_attack_power is not None:
            battlefield.set_attack_power(Faction.ELF, elf_attack_power)
        if goblin_attack_power is not None:
            battlefield.set_attack_power(Faction.GOBLIN, goblin_attack_power)

    @property
    def rounds(self) -> int:
        """Number of fully completed rounds."""
        return self.battlefield.rounds

    def status(self) -> FightResult:
        """Current state of the combat state machine."""
        elves_alive = self.battlefield.has_units(Faction.ELF)
        goblins_alive = self.battlefield.has_units(Faction.GOBLIN)
        if not elves_alive and not goblins_alive:
            return FightResult.tie()
        if not elves_alive:
            return FightResult.goblins_win(self.battlefield.total_hit_points(Faction.GOBLIN))
        if not goblins_alive:
            return FightResult.elves_win(self.battlefield.total_hit_points(Faction.ELF))
        return FightResult.ongoing()

    # ============== Rounds ==============

    def fight(self) -> FightResult:
        """Fight until one side is eliminated.

        Raises:
            CombatStalemateError: If the factions can never reach each other
        """
        result = self.status()
        while not result.is_terminal:
            result = self.fight_round()
        self.log.system(f"Combat ends after {self.rounds} full rounds: {result.describe()}")
        return result

    def fight_rounds(self, number_of_rounds: int) -> FightResult:
        """Fight at most ``number_of_rounds`` rounds, stopping early when combat ends."""
        result = self.status()
        for _ in range(number_of_rounds):
            if result.is_terminal:
                break
            result = self.fight_round()
        return result

    def fight_round(self) -> FightResult:
        """Play one round.

        The round stops as soon as a faction is wiped out. It only counts
        when every unit scheduled at round start was reached, whether it
        took its turn or was skipped because it died earlier in the round.

        Raises:
            CombatStalemateError: If nobody moved or attacked during the round
        """
        result = self.status()
        if result.is_terminal:
            return result

        order = TurnOrder(self.battlefield.units())
        reports: list[TurnReport] = []
        while True:
            entry = order.pop_next()
            if entry is None:
                break
            unit = self.battlefield.get_unit(entry.unit_id)
            if unit is None:
                continue
            reports.append(self.take_turn(unit))
            result = self.status()
            if result.is_terminal and len(order) > 0:
                self.log.battle(
                    f"{FACTION_DATA[unit.faction.enemy].name} wiped out with {len(order)} turns "
                    f"left in round {self.rounds + 1}; the round does not count"
                )
                return result

        self.battlefield.rounds += 1
        self.log.battle(f"Round {self.rounds} complete")

        result = self.status()
        if not result.is_terminal and all(report.is_idle for report in reports):
            self.log.warning(f"Nobody moved or attacked in round {self.rounds}")
            raise CombatStalemateError(
                f"No unit can move or attack after round {self.rounds}; combat would never end"
            )
        return result

    # ============== Turns ==============

    def take_turn(self, unit: Unit) -> TurnReport:
        """Move (unless already in range) and then attack."""
        report = TurnReport(unit.unit_id)
        if self.resolver.select_target(unit) is None:
            report.moved_to = self.move_towards_enemies(unit)
        report.attack = self.resolver.execute_attack(unit)
        return report

    def in_range_squares(self, unit: Unit) -> list[Vector2]:
        """Free squares adjacent to any living enemy, in reading order."""
        squares = set()
        for enemy in self.battlefield.units_of(unit.faction.enemy):
            for neighbor in enemy.position.neighbors():
                if self.battlefield.is_free(neighbor):
                    squares.add(neighbor)
        return sorted(squares)

    def move_towards_enemies(self, unit: Unit) -> Optional[Vector2]:
        """Take one step towards the nearest reachable in-range square.

        Returns:
            The new position, or None if the unit could not move
        """
        targets = self.in_range_squares(unit)
        if not targets:
            return None

        path = path_to_nearest_target(unit.position, targets, self.battlefield.get_passable_mask())
        if len(path) < 2:
            self.log.debug(f"{unit} has no reachable square in range of an enemy")
            return None

        origin, step = unit.position, path[1]
        moved = self.battlefield.move_unit(unit.unit_id, step)
        assert moved, f"{unit} could not step from {origin} to {step}"
        self.log.movement(f"{unit} moves {origin} -> {step} towards {path[-1]}")
        return step


def run_to_completion(
    battlefield: Battlefield,
    elf_attack_power: Optional[int] = None,
    log_manager: Optional[LogManager] = None,
) -> tuple[FightResult, int]:
    """Fight a copy of the battlefield to the end.

    Returns:
        ``(final state, fully completed rounds)``
    """
    combat = Combat(battlefield.copy(), elf_attack_power=elf_attack_power, log_manager=log_manager)
    result = combat.fight()
    return result, combat.rounds
