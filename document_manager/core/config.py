from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Параметры генератора идентификаторов
    id_length: int = Field(16, ge=1)
    id_lower_bound: str = Field("!", min_length=1, max_length=1)
    id_upper_bound: str = Field("z", min_length=1, max_length=1)  # не включается

    # Хранить копию документа вместо ссылки на объект вызывающего
    copy_on_save: bool = False

    model_config = {"env_prefix": "DOCUMENT_MANAGER_", "env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def validate_id_bounds(self):
        if ord(self.id_lower_bound) >= ord(self.id_upper_bound):
            raise ValueError("id_lower_bound must be lower than id_upper_bound")
        return self


settings = Settings()
