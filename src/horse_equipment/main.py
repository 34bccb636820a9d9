"""CLI startup entrypoint for Horse Equipment."""

from __future__ import annotations

import asyncio
from collections import Counter

import click
import typer
from rich import print

from horse_equipment.adapters import InMemoryItemCatalog, SimulatedHorse
from horse_equipment.config import settings
from horse_equipment.config_store import ConfigLoadError, ConfigStore
from horse_equipment.models import SlotAssignmentResult
from horse_equipment.service import HorseEquipmentService
from horse_equipment.telemetry.logging import configure_logging

app = typer.Typer(help="Horse Equipment service entrypoint")


def _build_store(config_file: str | None) -> ConfigStore:
    return ConfigStore(config_file or settings.config_path)


def _build_service(config_file: str | None, seed: int | None, delay: float | None = None) -> HorseEquipmentService:
    configure_logging(settings.log_level)
    return HorseEquipmentService(
        catalog=InMemoryItemCatalog(),
        store=_build_store(config_file),
        seed=seed if seed is not None else settings.rng_seed,
        batch_delay_seconds=delay if delay is not None else settings.batch_delay_seconds,
    )


def _init_or_exit(service: HorseEquipmentService) -> None:
    try:
        service.init()
    except ConfigLoadError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _describe(horse: SimulatedHorse, result: SlotAssignmentResult) -> dict:
    return {
        "horse": horse.name,
        "seats": int(result.seat_count),
        "slots_to_fill": result.slots_to_fill,
        "items": [f"{item.identifier} x{item.amount} ({item.slot_category.value})" for item in result.granted_items],
    }


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "config_path": settings.config_path,
            "rng_seed": settings.rng_seed,
            "batch_delay_seconds": settings.batch_delay_seconds,
        }
    )


@app.command("show-config")
def show_config(config_file: str = typer.Option(None, help="Path to the equipment configuration JSON")) -> None:
    """Load (and migrate if needed) the configuration document, then print it."""
    configure_logging(settings.log_level)
    try:
        config = _build_store(config_file).load()
    except ConfigLoadError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print(config.model_dump(by_alias=True))


@app.command("reset-config")
def reset_config(config_file: str = typer.Option(None, help="Path to the equipment configuration JSON")) -> None:
    """Overwrite the configuration document with defaults."""
    store = _build_store(config_file)
    config = store.reset()
    print({"reset": str(store.path), "version": config.version})


@app.command()
def roll(
    seed: int = typer.Option(None, help="Seed for reproducible rolls"),
    config_file: str = typer.Option(None, help="Path to the equipment configuration JSON"),
) -> None:
    """Equip a single simulated horse and print the outcome."""
    service = _build_service(config_file, seed)
    _init_or_exit(service)

    horse = SimulatedHorse(name="horse-1")
    print(_describe(horse, service.equip(horse)))


@app.command()
def simulate(
    horses: int = typer.Option(25, min=0, help="Size of the pre-existing herd"),
    spawns: int = typer.Option(0, min=0, help="Horses spawned after the startup sweep begins"),
    seed: int = typer.Option(None, help="Seed for reproducible rolls"),
    delay: float = typer.Option(None, click_type=click.FloatRange(min=0.0, min_open=True), help="Pause between horses during the sweep"),
    config_file: str = typer.Option(None, help="Path to the equipment configuration JSON"),
) -> None:
    """Run the startup sweep over a simulated herd and report what was handed out."""
    service = _build_service(config_file, seed, delay)
    _init_or_exit(service)

    herd = [SimulatedHorse(name=f"horse-{index + 1}") for index in range(horses)]
    newcomers = [SimulatedHorse(name=f"spawned-{index + 1}") for index in range(spawns)]

    async def _run() -> int | None:
        service.on_server_initialized(herd)
        for horse in newcomers:
            service.on_entity_spawned(horse)
        processed = await service.batch.wait()
        await asyncio.sleep(0)
        service.shutdown()
        return processed

    processed = asyncio.run(_run())

    everyone = [*herd, *newcomers]
    seats = Counter(horse.seat_count for horse in everyone)
    items = Counter(len(horse.equipment.items) for horse in everyone if horse.equipment is not None)
    print(
        {
            "swept": processed,
            "spawned": len(newcomers),
            "seats": {tier: seats.get(tier, 0) for tier in (0, 1, 2)},
            "items_per_horse": dict(sorted(items.items())),
        }
    )


if __name__ == "__main__":
    app()
