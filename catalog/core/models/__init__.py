from catalog.core.models.university import University
from catalog.core.models.program import Program
from catalog.core.models.specialization import Specialization
from catalog.core.models.subject import Subject
from catalog.core.models.subject_specialization import SubjectSpecialization
from catalog.core.models.subject_program import SubjectProgram
from catalog.core.models.study_resource import StudyResource

__all__ = [
    "Program",
    "Specialization",
    "StudyResource",
    "Subject",
    "SubjectProgram",
    "SubjectSpecialization",
    "University",
]
