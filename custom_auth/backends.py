from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend


class CaseInsensitiveEmailBackend(ModelBackend):
    """
    Authenticate against the email address, ignoring case.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        UserModel = get_user_model()
        if username is None:
            username = kwargs.get(UserModel.USERNAME_FIELD)
        if not username or password is None:
            return None

        user = UserModel.objects.filter(email__iexact=username.strip()).first()
        if user is None:
            UserModel().set_password(password)  # same cost as a real check
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
