"""AptSkola mailer: delivers the admissions toolkit PDF and schedules a follow-up."""
