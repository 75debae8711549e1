from .user import Profile
from .academic import College, Faculty, Student, StudentIncident
from .staff import Staff
from .facilities import LectureRoom, HostelHouse, HostelRoom, HostelOccupant
from .medical import MedicalRecord
from .inventory import Material, ExternalPracticeSession
from .communication import Announcement, ChatbotMessage
