"""
    Модуль plotting/standard_plots.py.
    Состав:
    Классы: нет.
    Функции: plot_component_traces, plot_thermal.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
import matplotlib
import matplotlib.pyplot as plt

from core.results import SimulationResults

matplotlib.rcParams['font.size'] = 9
matplotlib.rcParams['axes.grid'] = True
matplotlib.rcParams['figure.dpi'] = 150

# Доп. величина по виду компонента для четвёртой панели
_EXTRA_PANEL = (
    ("brightness", "Яркость, о.е."),
    ("rpm", "n, об/мин"),
    ("charge", "Заряд, Кл"),
)


def _mark_burnout(ax, res: SimulationResults, cid: str) -> None:
    """Отмечает момент выгорания вертикальной линией."""
    t_burn = res.burn_time(cid)
    if t_burn is not None:
        ax.axvline(t_burn, color='r', ls='--', lw=0.8)


def _save(fig, save_path: Optional[str]) -> None:
    """Сохраняет рисунок, если задан путь."""
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, bbox_inches='tight')
        print(f"  Saved: {save_path}")


def plot_component_traces(res: SimulationResults, save_path: Optional[str] = None):
    """Строит напряжения, токи, мощности и доп. показания компонентов."""

    t = res.t
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(res.scenario_name, fontsize=13, fontweight='bold')

    for cid in res.component_ids:
        label = res.label(cid)
        axes[0, 0].plot(t, res.trace(cid, "voltage"), lw=0.8, label=label)
        axes[0, 1].plot(t, res.trace(cid, "current") * 1e3, lw=0.8, label=label)
        axes[1, 0].plot(t, res.trace(cid, "power"), lw=0.8, label=label)
        for ax in (axes[0, 0], axes[0, 1], axes[1, 0]):
            _mark_burnout(ax, res, cid)

    axes[0, 0].set(xlabel='Время, с', ylabel='U, В', title='Напряжение на компонентах')
    axes[0, 1].set(xlabel='Время, с', ylabel='I, мА', title='Ток компонентов')
    axes[1, 0].set(xlabel='Время, с', ylabel='P, Вт', title='Рассеиваемая мощность')

    ax = axes[1, 1]
    plotted = False
    for quantity, ylabel in _EXTRA_PANEL:
        for cid in res.component_ids:
            if quantity in res.traces[cid]:
                ax.plot(t, res.trace(cid, quantity), lw=0.8,
                        label=f"{res.label(cid)}: {quantity}")
                ax.set(ylabel=ylabel)
                plotted = True
    ax.set(xlabel='Время, с', title='Показания устройств')
    if not plotted:
        ax.text(0.5, 0.5, 'нет данных', ha='center', va='center',
                transform=ax.transAxes)

    for ax in axes.flat:
        if ax.get_legend_handles_labels()[0]:
            ax.legend(fontsize=8)

    _save(fig, save_path)
    return fig


def plot_thermal(res: SimulationResults, save_path: Optional[str] = None):
    """Строит температуры компонентов и пороги выгорания."""

    fig, ax = plt.subplots(figsize=(10, 5))
    sim = res.extra.get("simulator")
    thresholds = {}
    if sim is not None:
        thresholds = {c.id: c.thermal.params.max_temperature for c in sim.components}

    for cid in res.component_ids:
        line, = ax.plot(res.t, res.trace(cid, "temperature"), lw=0.8, label=res.label(cid))
        if cid in thresholds:
            ax.axhline(thresholds[cid], color=line.get_color(), ls=':', lw=0.6)
        _mark_burnout(ax, res, cid)

    temps = [res.trace(cid, "temperature") for cid in res.component_ids]
    if temps:
        t_max = float(np.nanmax(np.concatenate(temps)))
        ax.set_ylim(bottom=min(20.0, t_max), top=max(t_max * 1.1, 30.0))

    ax.set(xlabel='Время, с', ylabel='T, °C', title=f'{res.scenario_name}: температура')
    if res.component_ids:
        ax.legend(fontsize=8)

    _save(fig, save_path)
    return fig
