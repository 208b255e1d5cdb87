"""Built-in document catalog served by the local content store."""

from typing import Tuple

from docsite.models.document import CatalogEntry

_UNSPLASH = "https://images.unsplash.com/{photo}?w=1200&h=400&fit=crop"

CATALOG: Tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="getting-started-keptn",
        title="Getting Started with Keptn",
        description="Learn the basics of Keptn and how to set up your first project",
        category="Keptn Integrations",
        tags=["beginner", "setup", "tutorial"],
        updated_at="2026-01-20",
        path="docs/getting-started-keptn.md",
        cover_image=_UNSPLASH.format(photo="photo-1551288049-bebda4e38f71"),
    ),
    CatalogEntry(
        id="youtube-api-integration",
        title="YouTube API Integration Guide",
        description="Learn how to integrate YouTube's Data API v3 into your applications",
        category="API Integration",
        tags=["youtube", "api", "video"],
        updated_at="2026-01-22",
        path="docs/youtube-api-integration.md",
        cover_image=_UNSPLASH.format(photo="photo-1611162616305-c69b3fa7fbe0"),
    ),
    CatalogEntry(
        id="helm-chart-best-practices",
        title="Helm Chart Best Practices",
        description="Create production-ready Helm charts that are maintainable and secure",
        category="Helm Charts",
        tags=["helm", "kubernetes", "best-practices"],
        updated_at="2026-01-18",
        path="docs/helm-chart-best-practices.md",
        cover_image=_UNSPLASH.format(photo="photo-1605745341075-1a6e8b9e7b8e"),
    ),
    CatalogEntry(
        id="docker-optimization",
        title="Docker Image Optimization",
        description="Best practices for creating smaller, faster, and more secure Docker images",
        category="Container Images",
        tags=["docker", "optimization", "security"],
        updated_at="2026-01-21",
        path="docs/docker-optimization.md",
        cover_image=_UNSPLASH.format(photo="photo-1605745341112-85968b19335b"),
    ),
    CatalogEntry(
        id="kubernetes-networking",
        title="Kubernetes Networking Deep Dive",
        description="Understanding Kubernetes networking model, services, and policies",
        category="Kubernetes",
        tags=["kubernetes", "networking", "advanced"],
        updated_at="2026-01-19",
        path="docs/kubernetes-networking.md",
        cover_image=_UNSPLASH.format(photo="photo-1558494949-ef010cbdcc31"),
    ),
    CatalogEntry(
        id="ci-cd-pipelines",
        title="Modern CI/CD Pipelines",
        description="Build automated CI/CD pipelines with GitHub Actions, GitLab CI, and Jenkins",
        category="DevOps",
        tags=["cicd", "automation", "deployment"],
        updated_at="2026-01-23",
        path="docs/ci-cd-pipelines.md",
        cover_image=_UNSPLASH.format(photo="photo-1667372393119-3d4c48d07fc9"),
    ),
    CatalogEntry(
        id="video-streaming-architecture",
        title="Video Streaming Architecture",
        description="Building a scalable video streaming platform like YouTube or Netflix",
        category="Architecture",
        tags=["video", "streaming", "architecture"],
        updated_at="2026-01-24",
        path="docs/video-streaming-architecture.md",
        cover_image=_UNSPLASH.format(photo="photo-1574717024653-61fd2cf4d44d"),
    ),
    CatalogEntry(
        id="microservices-patterns",
        title="Microservices Design Patterns",
        description="Essential patterns for building resilient distributed systems",
        category="Architecture",
        tags=["microservices", "patterns", "distributed-systems"],
        updated_at="2026-01-17",
        path="docs/microservices-patterns.md",
        cover_image=_UNSPLASH.format(photo="photo-1558494949-ef010cbdcc31"),
    ),
    CatalogEntry(
        id="monitoring-observability",
        title="Monitoring & Observability",
        description="Implement comprehensive monitoring with Prometheus, Grafana, and OpenTelemetry",
        category="DevOps",
        tags=["monitoring", "observability", "prometheus"],
        updated_at="2026-01-16",
        path="docs/monitoring-observability.md",
        cover_image=_UNSPLASH.format(photo="photo-1551288049-bebda4e38f71"),
    ),
    CatalogEntry(
        id="content-delivery-networks",
        title="Content Delivery Networks (CDN)",
        description="Optimize global content delivery with CDN strategies and best practices",
        category="Infrastructure",
        tags=["cdn", "performance", "caching"],
        updated_at="2026-01-25",
        path="docs/content-delivery-networks.md",
        cover_image=_UNSPLASH.format(photo="photo-1558494949-ef010cbdcc31"),
    ),
)
