# hr/urls/__init__.py
from hr.container import build_container

from . import department_urls, employee_urls, job_urls, region_urls

# Repositories + services được tạo một lần và inject vào từng view
container = build_container()

urlpatterns = [
    *region_urls.build_urlpatterns(container),
    *department_urls.build_urlpatterns(container),
    *job_urls.build_urlpatterns(container),
    *employee_urls.build_urlpatterns(container),
]
