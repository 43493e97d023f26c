from typing import Dict, Any

from sqlalchemy import Column, Integer, VARCHAR, Date, Time

from app.db.base import Base


class ClassRecord(Base):
    """
    课程安排数据库模型

    一条记录对应讲师安排的一次课：课程代码、标题、日期、起止时间和地点
    """
    __tablename__ = "class"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    course_code = Column("courseCode", VARCHAR(50), nullable=False)
    title = Column(VARCHAR(255), nullable=False)
    date = Column(Date, nullable=False)
    time_start = Column("timeStart", Time, nullable=False)
    time_end = Column("timeEnd", Time, nullable=False)
    location = Column("classLocation", VARCHAR(255), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        """按数据库列名转换为字典，日期为 YYYY-MM-DD，时间为 HH:MM:SS"""
        return {
            "id": self.id,
            "courseCode": self.course_code,
            "title": self.title,
            "date": self.date.isoformat() if self.date else None,
            "timeStart": self.time_start.strftime("%H:%M:%S") if self.time_start else None,
            "timeEnd": self.time_end.strftime("%H:%M:%S") if self.time_end else None,
            "classLocation": self.location,
        }
