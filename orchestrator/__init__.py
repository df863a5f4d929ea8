from orchestrator import observability
from orchestrator import registry

from orchestrator.observability import (ObservabilityManager, TraceSpan,
                                        configure_logging, increment,
                                        log_metric, log_metrics,
                                        trace_request,)
from orchestrator.registry import (Registry,)

__all__ = ['ObservabilityManager', 'Registry', 'TraceSpan',
           'configure_logging', 'increment', 'log_metric', 'log_metrics',
           'observability', 'registry', 'trace_request']
