from adrs.domain.doctor.model.value import Check, Diagnostic, DoctorReport, Severity

__all__ = ["Check", "Diagnostic", "DoctorReport", "Severity"]
