from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('userApp.urls')),
    path('crops/', include('cropApp.urls')),
    path('tasks/', include('taskApp.urls')),
    path('finance/', include('financeApp.urls')),
    path('irrigation/', include('irrigationApp.urls')),
    path('weather/', include('weatherApp.urls')),
    path('marketplace/', include('marketApp.urls')),
    path('advisory/', include('advisoryApp.urls')),
    path('resources/', include('resourceApp.urls')),
    path('dashboard/', include('dashboardApp.urls')),
    path('language/', include('languageApp.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
