from adrs.domain.record.service.record import RecordService

__all__ = ["RecordService"]
