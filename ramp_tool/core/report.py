"""Report builder: text and JSON output for ramp-tool results."""

import json
import re
from typing import Any

from ramp_tool.core.colour_space import to_approx_oklch
from ramp_tool.core.palette import rgb_to_hex
from ramp_tool.core.types import Ramp, Report

ORGANISATIONS = ('nested', 'flat')


def token_name(colour_name: str, step: str, organisation: str = 'nested') -> str:
    """Design-token name for one step: 'Blue/100' (nested) or 'Blue-100' (flat)."""
    sanitised = re.sub(r'[^a-zA-Z0-9\s]', '', colour_name).strip()
    if organisation == 'flat':
        return f'{sanitised}-{step}'
    return f'{sanitised}/{step}'


def add_ramp(
    report: Report,
    ramp: Ramp,
    tolerance: float,
    name: str | None = None,
    organisation: str = 'nested',
) -> Report:
    """Fill a Report from a solved Ramp; a step passes when within tolerance of its target."""
    report.title = ramp.title
    report.seed = ramp.seed
    report.meta['tolerance'] = tolerance
    for rs in ramp.steps:
        sol = rs.solution
        lch = to_approx_oklch(sol.colour)
        delta = abs(sol.contrast - sol.target)
        data: dict[str, Any] = {
            'hex': rgb_to_hex(sol.colour),
            'rgb': [round(v, 6) for v in sol.colour.as_tuple()],
            'lch': {'l': round(lch.l, 4), 'c': round(lch.c, 4), 'h': round(lch.h, 1)},
            'contrast': round(sol.contrast, 3),
            'target': sol.target,
            'delta': round(delta, 3),
            'iterations': sol.iterations,
            'converged': sol.converged,
            'pass': delta < tolerance,
        }
        if name:
            data['token'] = token_name(name, rs.step, organisation)
        report.add(rs.step, data)
        if delta < tolerance:
            report.record_pass(rs.step)
        else:
            report.record_fail(rs.step)
    return report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.title:
        lines.append(report.title)
        lines.append('')

    for step, data in report.steps.items():
        if 'hex' in data and 'contrast' in data:
            mark = '✓' if data.get('pass') else '✗'
            token = f'  {data["token"]}' if 'token' in data else ''
            lines.append(
                f'── {step:<4} {data["hex"]}  contrast {data["contrast"]:.2f}'
                f' (target {data["target"]:g})  Δ={data["delta"]:.3f}  {mark}{token}'
            )
        elif 'multiplier' in data:
            bar = '█' * int(round(max(0.0, data['multiplier']) * 20))
            lines.append(f'── {step:<4} {data["multiplier"]:.4f}  {bar}')
        else:
            # Generic fallback
            lines.append(f'── {step}')
            for k, v in data.items():
                lines.append(f'  {k}: {v}')

    for k, v in report.meta.items():
        if k == 'tolerance':
            continue
        lines.append(f'{k}: {v}')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append('')
        lines.append(f'PASS {report.pass_count}/{total} steps  FAIL {report.fail_count}/{total} steps')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {}
    if report.title:
        obj['title'] = report.title
    if report.seed:
        obj['seed'] = report.seed
    obj.update(report.meta)

    obj['steps'] = [{'step': step, **data} for step, data in report.steps.items()]

    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)
