from sqlalchemy import Column, Date, String

from app.db.database import Base


class UserLogin(Base):
    __tablename__ = "user_login"

    user_id = Column(String, primary_key=True)  # username or opaque id
    # stored verbatim; hashing belongs to the calling application
    user_password = Column(String, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    sign_up_on = Column(Date, nullable=True)
    email_id = Column(String, unique=True, nullable=True)

    def __repr__(self):
        return f"<UserLogin {self.user_id}>"
