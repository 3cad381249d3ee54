"""Runtime services shared across lint_patch (telemetry)."""
