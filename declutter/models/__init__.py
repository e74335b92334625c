from .extraction_config import ExtractionConfig, ExtractionPhase, ScoringStrategy
from .mirror_node import MirrorNode, NodeKind

__all__ = ['ExtractionConfig', 'ExtractionPhase', 'ScoringStrategy', 'MirrorNode', 'NodeKind',]
