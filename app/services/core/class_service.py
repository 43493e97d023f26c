import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.infrastructure.exceptions import NotFoundError, StorageError, ValidationError
from app.models.class_record import ClassRecord
from app.schemas.class_record import ClassCreate, ClassDelete, ClassUpdate
from app.utils.datetime_format import to_storage_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("courseCode", "title", "date", "timeStart", "timeEnd", "location")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def validate_required_fields(payload: ClassCreate) -> None:
    """
    校验创建/更新请求的必填字段

    Raises:
        ValidationError: 任一字段缺失或为空字符串
    """
    missing = [name for name in REQUIRED_FIELDS if _is_blank(getattr(payload, name))]
    if missing:
        logger.info(f"缺少必填字段: {missing}")
        raise ValidationError()


def validate_id(value: Any) -> None:
    if _is_blank(value):
        logger.info("缺少必填字段: ['id']")
        raise ValidationError()


class ClassService:
    """
    课程安排服务

    每个操作只执行一条语句，数据库会话由调用方注入并负责释放
    """

    def __init__(self, db: Session, update_lookup_field: str = None):
        self.db = db
        self.update_lookup_field = update_lookup_field or settings.CLASS_UPDATE_LOOKUP_FIELD

    def _lookup_clause(self, value: Any):
        if self.update_lookup_field == "id":
            return ClassRecord.id == value
        return ClassRecord.course_code == str(value)

    def create_class(self, payload: ClassCreate) -> int:
        """
        新增一条课程记录

        Returns:
            int: 数据库生成的记录ID
        """
        validate_required_fields(payload)
        fields = to_storage_fields(payload)

        record = ClassRecord(**fields)
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(str(e)) from e

        logger.info(f"课程添加成功: id={record.id}, courseCode={record.course_code}")
        return record.id

    def list_classes(self) -> List[Dict[str, Any]]:
        """获取全部课程记录，不保证顺序"""
        try:
            records = self.db.query(ClassRecord).all()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return [record.to_dict() for record in records]

    def update_class(self, payload: ClassUpdate) -> Any:
        """
        覆盖更新一条课程记录

        按 update_lookup_field 指定的列匹配请求体中的 id

        Returns:
            请求体中的 id

        Raises:
            NotFoundError: 没有匹配的记录
        """
        validate_required_fields(payload)
        validate_id(payload.id)
        fields = to_storage_fields(payload)

        values = {getattr(ClassRecord, name): value for name, value in fields.items()}
        try:
            matched = (
                self.db.query(ClassRecord)
                .filter(self._lookup_clause(payload.id))
                .update(values, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(str(e)) from e

        if matched == 0:
            raise NotFoundError()

        logger.info(f"课程更新成功: id={payload.id}, 影响行数={matched}")
        return payload.id

    def delete_class(self, payload: ClassDelete) -> Any:
        """
        按主键删除一条课程记录

        Returns:
            请求体中的 id

        Raises:
            NotFoundError: 没有匹配的记录
        """
        validate_id(payload.id)
        try:
            deleted = (
                self.db.query(ClassRecord)
                .filter(ClassRecord.id == payload.id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(str(e)) from e

        if deleted == 0:
            raise NotFoundError()

        logger.info(f"课程删除成功: id={payload.id}")
        return payload.id
