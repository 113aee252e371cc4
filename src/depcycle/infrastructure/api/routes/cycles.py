"""
Dependency cycle analysis API routes.

Implements the REST API for detecting cycles between projects and classes.
Handlers are synchronous: enumeration is CPU-bound and runs in the thread pool.
"""

import time

from fastapi import APIRouter, Depends, Response, status

from depcycle.application.dtos.cycle_analysis_dto import (
    ClassDependencyDTO,
    ClassReferenceDTO,
    CycleAnalysisResponse,
    ProjectDependencyDTO,
)
from depcycle.application.use_cases.analyze_dependency_cycles import (
    AnalyzeDependencyCyclesUseCase,
    GraphTooLargeError,
)
from depcycle.infrastructure.api.dependencies import (
    get_analyze_dependency_cycles_use_case,
    get_app_settings,
    get_cycle_cache,
)
from depcycle.infrastructure.api.schemas.cycle_analysis_schema import (
    BreakpointApiModel,
    ClassCycleAnalysisApiRequest,
    CycleAnalysisApiResponse,
    CycleApiModel,
    CycleCacheStatusApiResponse,
    HotspotApiModel,
    ProjectCycleAnalysisApiRequest,
)
from depcycle.infrastructure.api.schemas.error_schema import ProblemDetails
from depcycle.infrastructure.cache.in_memory_cycle_cache import (
    InMemoryCycleCache,
    NullCycleCache,
)
from depcycle.infrastructure.config import Settings
from depcycle.infrastructure.observability.logging import get_logger
from depcycle.infrastructure.observability.metrics import (
    record_cycle_analysis,
    record_graph_rejected,
)

logger = get_logger(__name__)

router = APIRouter()

ANALYSIS_RESPONSES = {
    200: {"description": "Cycle analysis completed"},
    413: {"model": ProblemDetails, "description": "Graph exceeds analysis bounds"},
    422: {"model": ProblemDetails, "description": "Invalid request schema"},
    500: {"model": ProblemDetails, "description": "Internal server error"},
}


@router.post(
    "/projects",
    response_model=CycleAnalysisApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Analyze project dependency cycles",
    description="Detect cycles between projects and rank hotspots and breakpoints",
    responses=ANALYSIS_RESPONSES,
)
def analyze_project_cycles(
    request: ProjectCycleAnalysisApiRequest,
    use_case: AnalyzeDependencyCyclesUseCase = Depends(
        get_analyze_dependency_cycles_use_case
    ),
) -> CycleAnalysisApiResponse:
    """
    Analyze cycles in a project reference graph.

    - Builds one node per project; references to unknown projects are leaves
    - Returns each elementary cycle once, with its first node repeated at the end
    - Results for an identical graph are served from the shared cache
    """
    projects = [
        ProjectDependencyDTO(project_id=p.id, dependency_ids=list(p.dependency_ids))
        for p in request.projects
    ]
    return _run_analysis("project", lambda: use_case.analyze_projects(projects))


@router.post(
    "/classes",
    response_model=CycleAnalysisApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Analyze class dependency cycles",
    description="Detect cycles between classes and rank hotspots and breakpoints",
    responses=ANALYSIS_RESPONSES,
)
def analyze_class_cycles(
    request: ClassCycleAnalysisApiRequest,
    use_case: AnalyzeDependencyCyclesUseCase = Depends(
        get_analyze_dependency_cycles_use_case
    ),
) -> CycleAnalysisApiResponse:
    """
    Analyze cycles in a class reference graph.

    - Nodes are named "<project_id>.<class_name>"
    - References resolve within the same project first, then across projects
    - Unresolved references are ignored
    """
    classes = [
        ClassDependencyDTO(
            class_name=c.class_name,
            namespace=c.namespace,
            project_id=c.project_id,
            dependency_refs=[
                ClassReferenceDTO(class_name=r.class_name, namespace=r.namespace)
                for r in c.dependency_refs
            ],
        )
        for c in request.classes
    ]
    return _run_analysis("class", lambda: use_case.analyze_classes(classes))


@router.get(
    "/cache",
    response_model=CycleCacheStatusApiResponse,
    status_code=status.HTTP_200_OK,
    summary="Cycle cache status",
)
def get_cache_status(
    cache: InMemoryCycleCache | NullCycleCache = Depends(get_cycle_cache),
    settings: Settings = Depends(get_app_settings),
) -> CycleCacheStatusApiResponse:
    """Report whether memoization is enabled and how many graphs are cached."""
    return CycleCacheStatusApiResponse(
        enabled=settings.analysis.cache_enabled,
        entries=cache.size,
    )


@router.delete(
    "/cache",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear cycle cache",
    response_class=Response,
)
def clear_cache(
    cache: InMemoryCycleCache | NullCycleCache = Depends(get_cycle_cache),
) -> Response:
    """Drop every memoized cycle set."""
    entries = cache.size
    cache.clear()
    logger.info("Cycle cache cleared", entries_removed=entries)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _run_analysis(cycle_type: str, analyze) -> CycleAnalysisApiResponse:
    """Run an analysis callable, record metrics, and convert the result."""
    start_time = time.perf_counter()
    try:
        result = analyze()
    except GraphTooLargeError:
        record_graph_rejected(cycle_type)
        raise

    duration = time.perf_counter() - start_time
    record_cycle_analysis(
        cycle_type=cycle_type,
        cycles_detected=result.total_cycles,
        duration=duration,
    )
    logger.info(
        "Cycle analysis completed",
        cycle_type=cycle_type,
        node_count=result.node_count,
        edge_count=result.edge_count,
        total_cycles=result.total_cycles,
        longest_cycle=result.longest_cycle,
        duration_ms=round(duration * 1000, 2),
    )
    return _to_api_response(result)


def _to_api_response(result: CycleAnalysisResponse) -> CycleAnalysisApiResponse:
    return CycleAnalysisApiResponse(
        cycle_type=result.cycle_type,
        node_count=result.node_count,
        edge_count=result.edge_count,
        total_cycles=result.total_cycles,
        longest_cycle=result.longest_cycle,
        cycles=[
            CycleApiModel(
                nodes=cycle.nodes,
                cycle_type=cycle.cycle_type,
                complexity=cycle.complexity,
            )
            for cycle in result.cycles
        ],
        hotspots=[
            HotspotApiModel(node=h.node, cycle_count=h.cycle_count)
            for h in result.hotspots
        ],
        breakpoints=[
            BreakpointApiModel(node=b.node, impact=b.impact)
            for b in result.breakpoints
        ],
    )
