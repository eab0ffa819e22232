"""
sukima.planner
~~~~~~~~~~~~~~

One call per scan window: the holidays, the vacant periods left over by the
caller's occupied ranges, and the anniversaries falling inside the window.

Basic usage::

    from sukima.planner import plan_window

    plan = plan_window("2026-01-01", [("2026-05-02", "2026-05-04")])
    plan.range_end              # → CalendarDate('2028-01-01')
    plan.long_weekends          # → 3–5 day runs with a weekend and a holiday
"""

from sukima.planner.planner import DEFAULT_WINDOW_YEARS, WindowPlan, plan_window, window_end

__all__ = ["DEFAULT_WINDOW_YEARS", "WindowPlan", "plan_window", "window_end"]
