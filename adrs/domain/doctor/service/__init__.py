from adrs.domain.doctor.service.doctor import DoctorService

__all__ = ["DoctorService"]
