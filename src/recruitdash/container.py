"""Dependency injection container for the dashboard service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import AnalyticsConfig, DashboardCore
from .pipeline import DashboardPipeline, OutputWriter, SnapshotLoader


class DashboardContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    analytics_config = providers.Singleton(AnalyticsConfig)

    dashboard_core = providers.Singleton(
        DashboardCore,
        config=analytics_config,
    )

    snapshot_loader = providers.Singleton(SnapshotLoader)
    output_writer = providers.Singleton(OutputWriter)

    pipeline = providers.Factory(
        DashboardPipeline,
        core=dashboard_core,
        loader=snapshot_loader,
        writer=output_writer,
    )


def create_container(*, settings: dict | None = None) -> DashboardContainer:
    """Instantiate container with optional overrides."""

    container = DashboardContainer()

    if not settings:
        return container

    analytics_settings = settings.get("analytics", {}) if isinstance(settings, dict) else {}
    if analytics_settings:
        analytics_config = AnalyticsConfig(**analytics_settings)
        container.analytics_config.override(providers.Object(analytics_config))

    return container
