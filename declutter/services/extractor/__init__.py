from .classifiers import attribute_weight, tag_weight
from .formatter import render_html, render_markdown
from .instrumentation import chain_hooks, log_phase, observe_phase
from .pipeline import extract, extract_soup
from .reconstructor import materialize
from .selector import select_top_candidate
from .walker import FilteringWalker, build_mirror

__all__ = [
    'attribute_weight',
    'tag_weight',
    'render_html',
    'render_markdown',
    'chain_hooks',
    'log_phase',
    'observe_phase',
    'extract',
    'extract_soup',
    'materialize',
    'select_top_candidate',
    'FilteringWalker',
    'build_mirror',
]
