"""Cover letters, curated resumes and PDF/DOCX export from a job posting."""
