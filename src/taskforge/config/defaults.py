"""Default configuration values."""

# Seed workers, one per category, in registry order.
# (category, name, seed average execution time in ms, capabilities)
DEFAULT_WORKERS = [
    (
        "frontend",
        "Frontend Architect",
        5000,
        [
            "React/Next.js development",
            "TypeScript implementation",
            "UI/UX design",
            "Responsive design",
            "Component architecture",
            "State management",
            "Performance optimization",
        ],
    ),
    (
        "backend",
        "Backend Engineer",
        8000,
        [
            "Node.js/Express development",
            "TypeScript/JavaScript",
            "Database design",
            "API development",
            "Microservices architecture",
            "Authentication & authorization",
            "Performance optimization",
        ],
    ),
    (
        "database",
        "Database Architect",
        6000,
        [
            "PostgreSQL design",
            "Schema optimization",
            "Query optimization",
            "Database migrations",
            "Indexing strategies",
            "Data modeling",
            "Performance tuning",
        ],
    ),
    (
        "api",
        "API Integration Specialist",
        4000,
        [
            "RESTful API design",
            "GraphQL implementation",
            "Third-party integrations",
            "API documentation",
            "Rate limiting",
            "Error handling",
            "API security",
        ],
    ),
    (
        "testing",
        "Quality Assurance Engineer",
        7000,
        [
            "Unit testing",
            "Integration testing",
            "E2E testing",
            "Test automation",
            "Code review",
            "Quality metrics",
            "Bug detection",
        ],
    ),
    (
        "security",
        "Security Auditor",
        9000,
        [
            "Security auditing",
            "Vulnerability scanning",
            "Penetration testing",
            "OWASP compliance",
            "Code security review",
            "Access control",
            "Data encryption",
        ],
    ),
    (
        "performance",
        "Performance Optimizer",
        6500,
        [
            "Performance analysis",
            "Code optimization",
            "Bundle optimization",
            "Database tuning",
            "Caching strategies",
            "CDN configuration",
            "Load testing",
        ],
    ),
    (
        "documentation",
        "Documentation Generator",
        3000,
        [
            "API documentation",
            "Code documentation",
            "User guides",
            "Technical specifications",
            "Deployment guides",
            "Architecture diagrams",
            "README generation",
        ],
    ),
    (
        "deployment",
        "Deployment Manager",
        12000,
        [
            "Docker containerization",
            "Kubernetes deployment",
            "CI/CD pipelines",
            "Cloud deployment",
            "Environment management",
            "Rollback strategies",
            "Blue-green deployment",
        ],
    ),
    (
        "monitoring",
        "System Monitor",
        2000,
        [
            "Application monitoring",
            "Log analysis",
            "Alert management",
            "Performance tracking",
            "Error tracking",
            "Health checks",
            "Metrics collection",
        ],
    ),
]

# Simulated processing time per task category
DEFAULT_PROCESSING_TIMES_MS = {
    "code-generation": 5000,
    "analysis": 3000,
    "testing": 7000,
    "deployment": 10000,
    "optimization": 4000,
}

DEFAULT_FALLBACK_PROCESSING_TIME_MS = 3000

# Mock payloads returned by the simulated executor
DEFAULT_TASK_PAYLOADS = {
    "code-generation": {
        "files": [
            {"path": "src/components/Example.tsx", "language": "typescript"},
            {"path": "src/api/example.ts", "language": "typescript"},
        ],
        "dependencies": ["react", "typescript"],
        "estimatedLinesOfCode": 150,
    },
    "analysis": {
        "codeQuality": 85,
        "securityScore": 92,
        "performanceScore": 78,
        "issues": 3,
        "suggestions": 7,
    },
    "testing": {
        "testCoverage": 87,
        "testsGenerated": 24,
        "passRate": 96,
        "criticalIssues": 0,
    },
    "deployment": {
        "deploymentTime": "3m 45s",
        "environment": "production",
        "status": "successful",
        "url": "https://app.example.com",
    },
    "optimization": {
        "performanceGain": "23%",
        "bundleSize": "-15%",
        "loadTime": "-18%",
        "optimizations": 8,
    },
}

DEFAULT_FALLBACK_PAYLOAD = {"status": "completed"}

DEFAULT_RECOMMENDATIONS = {
    "code-generation": [
        "Consider implementing error boundaries",
        "Add proper TypeScript types",
        "Implement proper state management",
    ],
    "analysis": [
        "Increase test coverage",
        "Address security vulnerabilities",
        "Optimize database queries",
    ],
    "testing": [
        "Add more edge case tests",
        "Implement integration tests",
        "Consider performance testing",
    ],
    "deployment": [
        "Set up monitoring alerts",
        "Configure auto-scaling",
        "Implement health checks",
    ],
    "optimization": [
        "Consider code splitting",
        "Implement caching strategies",
        "Optimize bundle size",
    ],
}

DEFAULT_FALLBACK_RECOMMENDATIONS = ["Task completed successfully"]

# LLM execution defaults
DEFAULT_LLM_MODEL = "claude-sonnet-4-20250514"
DEFAULT_LLM_TEMPERATURE = 0.7
DEFAULT_LLM_MAX_TOKENS = 1000
