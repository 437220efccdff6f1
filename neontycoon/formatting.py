from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neontycoon.runtime import GameEngine
    from neontycoon.simulation import GreedyCheapest, SimulationReport


def format_status_report(engine: GameEngine) -> str:
    """Format the engine's current economy for console output."""
    state = engine.get_state()
    lines: list[str] = []

    lines.append("=" * 20 + f" {engine.config.name} " + "=" * 20)
    lines.append(f"Balance: {state.balance:,.2f}")
    lines.append(f"Income: {engine.get_income_per_sec():,.2f}/s")
    lines.append(f"Prestige currency: {state.prestige_currency}")
    lines.append(f"Prestige potential: {engine.calculate_prestige_potential()}")
    lines.append("")

    lines.append("BUILDINGS:")
    for status in engine.get_building_statuses():
        marker = "  *" if status.affordable else "   "
        lines.append(
            f"{marker} {status.display_name:.<24s} x{status.count:<4d} "
            f"next {status.current_cost:,.0f}"
        )
    lines.append("")

    if state.owned_skills:
        names = sorted(s.value for s in state.owned_skills)
        lines.append(f"SKILLS: {', '.join(names)}")
    else:
        lines.append("SKILLS: none")

    lines.append(
        f"STATS: {state.total_clicks} clicks, "
        f"{state.total_earnings:,.2f} earned, {state.prestige_count} prestiges"
    )
    return "\n".join(lines)


def format_simulation_report(report: SimulationReport, strategy: GreedyCheapest) -> str:
    lines: list[str] = []
    lines.append(f"Strategy: {strategy.describe()}")
    lines.append(f"Simulated: {report.total_time:.1f}s")
    lines.append(f"Purchases: {len(report.purchases)}")
    if report.purchases:
        last = report.purchases[-1]
        lines.append(f"  Last: building {last.index} at {last.time:.1f}s for {last.cost:,.0f}")
    lines.append(f"Clicks: {report.clicks}")
    lines.append(f"Final balance: {report.final_balance:,.2f}")
    lines.append(f"Final income: {report.final_income_per_sec:,.2f}/s")
    lines.append(f"Prestiges: {report.prestiges} ({report.prestige_currency} banked)")
    return "\n".join(lines)
