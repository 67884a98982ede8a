"""Infrastructure modules for the location mapper.

Centralized infrastructure components:
- configuration: Settings management (Settings, MaxMindSettings, ThreatMapSettings)
- logging: Structured logging (configure_logging, get_module_logger, bind_run_context)
- operations: Uniform operation results (OperationResult, OperationStatus)
- clients: External data source clients (MaxMindClient)
- services: Process-scoped providers (get_settings, get_maxmind_client)
"""
