"""Algorithms for ordering ideograms to minimise (or maximise) the number of
crossing links.

The search proceeds in rounds (:py:mod:`~ideorder.order.schedule`), each of
which either builds an order greedily from link connectivity
(:py:mod:`~ideorder.order.warmup`) or refines the current order by simulated
annealing (:py:mod:`~ideorder.order.anneal`). Orders are evaluated by a
:py:mod:`~ideorder.order.score` scorer.
"""

from ideorder.order.schedule import run_schedule, optimize_order
