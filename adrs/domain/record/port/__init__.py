from adrs.domain.record.port.repository import RecordRepository, ScanResult

__all__ = ["RecordRepository", "ScanResult"]
