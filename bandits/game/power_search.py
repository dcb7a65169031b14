"""Search for the weakest Elf attack power that wins without losing an Elf.

The search is linear: winning without losses is not known to be monotonic
in attack power, so every power from the configured start is tried in turn.
Each attempt replays the battle on a fresh copy of the starting battlefield
and is abandoned at the end of the first round in which an Elf died.
"""
from typing import Optional

from ..core.data import Faction
from ..core.engine import FightResult
from ..core.rules_loader import RulesConfig, get_rules_config
from .combat_manager import Combat
from .log_manager import LogManager
from .map import Battlefield


def attempt_flawless_victory(
    battlefield: Battlefield,
    elf_attack_power: int,
    goblin_attack_power: int,
    log_manager: LogManager,
) -> Optional[tuple[FightResult, int]]:
    """Fight a copy of the battlefield, giving up as soon as an Elf dies.

    Returns:
        ``(final state, rounds)`` if the fight ended with every Elf alive,
        None otherwise
    """
    elves_at_start = battlefield.count_units(Faction.ELF)
    combat = Combat(
        battlefield.copy(),
        elf_attack_power=elf_attack_power,
        goblin_attack_power=goblin_attack_power,
        log_manager=log_manager,
    )

    result = combat.status()
    while not result.is_terminal:
        round_number = combat.rounds + 1
        result = combat.fight_round()
        # Includes the round that ends the fight
        lost = elves_at_start - combat.battlefield.count_units(Faction.ELF)
        if lost > 0:
            log_manager.search(f"Lost {lost} Elves in round {round_number} with attack power {elf_attack_power}")
            return None
    return result, combat.rounds


def run_with_minimum_elf_power(
    battlefield: Battlefield,
    rules: Optional[RulesConfig] = None,
    log_manager: Optional[LogManager] = None,
) -> tuple[int, FightResult, int]:
    """Find the lowest Elf attack power that wins with zero Elf deaths.

    The given battlefield is never modified; each attempt works on its own
    copy, so hit points and positions never leak between attempts.

    Args:
        battlefield: Starting configuration of the battle
        rules: Rules providing the first power to try and the Goblin power
        log_manager: Log receiving search progress and battle messages

    Returns:
        ``(elf attack power, final state, fully completed rounds)``

    Raises:
        ValueError: If there are no Elves to protect
    """
    rules = rules or get_rules_config()
    log = log_manager or LogManager()

    if not battlefield.has_units(Faction.ELF):
        raise ValueError("The battlefield has no Elves; they cannot win")

    goblin_attack_power = rules.attack_power[Faction.GOBLIN]
    elf_attack_power = rules.search_start_power
    while True:
        log.search(f"Trying Elf attack power {elf_attack_power}")
        outcome = attempt_flawless_victory(battlefield, elf_attack_power, goblin_attack_power, log)
        if outcome is not None:
            result, rounds = outcome
            log.search(f"Elves win with attack power {elf_attack_power}: {result.describe()}")
            return elf_attack_power, result, rounds
        elf_attack_power += 1
