"""Domain modules package."""

from coursehub.modules.admin import models as admin_models  # noqa: F401
from coursehub.modules.applications import models as applications_models  # noqa: F401
from coursehub.modules.courses import models as courses_models  # noqa: F401
from coursehub.modules.enrollments import models as enrollments_models  # noqa: F401
from coursehub.modules.favorites import models as favorites_models  # noqa: F401
from coursehub.modules.identity import models as identity_models  # noqa: F401
from coursehub.modules.lessons import models as lessons_models  # noqa: F401
from coursehub.modules.payments import models as payments_models  # noqa: F401
from coursehub.modules.reviews import models as reviews_models  # noqa: F401
from coursehub.modules.teachers import models as teachers_models  # noqa: F401
