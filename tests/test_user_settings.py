"""
Tests for horatio/botsettings/user_node.py.
"""

from dataclasses import replace

import pytest

from horatio.botsettings.errors import (
    DuplicateValueError, ExternalServiceError, MissingArgumentError,
    NotFoundError, SettingsValidationError
)
from horatio.output import ENG_STRINGS
from horatio.utils.identity_utils import IdentityCheckError


class TestAboutMe:
    """Tests for the about me setting."""

    @pytest.mark.asyncio
    async def test_view_unset(self, dispatch_raw):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("user about")
        assert e.value.disp_type == "user_about_unset"

    @pytest.mark.asyncio
    async def test_set_and_view(self, run, store):
        response = await run("user about I like trains.")
        assert not response.is_error
        assert store.get_user("200").about_me == "I like trains."

        response = await run("user aboutme")
        assert response.fields == [
            (ENG_STRINGS["user_about_view_field"], "I like trains.")
        ]
        assert "200" in response.desc

    @pytest.mark.asyncio
    async def test_view_mentioned_user(self, run, store, context):
        store.ensure_user("42").about_me = "Hello there."
        request = replace(context, mentions=("42",))

        response = await run("user about <@!42>", request)
        assert response.fields[0][1] == "Hello there."
        assert store.get_user("200").about_me == ""

    @pytest.mark.asyncio
    async def test_view_mentioned_user_without_record(
            self,
            dispatch_raw,
            context
    ):
        request = replace(context, mentions=("43",))
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("user about <@43>", request)
        assert e.value.disp_type == "user_about_not_found"
        assert "43" in e.value.error_message

    @pytest.mark.asyncio
    async def test_unresolved_mention_is_text(self, run, store):
        await run("user about <@42>")
        assert store.get_user("200").about_me == "<@42>"


class TestTimezone:
    """Tests for the timezone setting."""

    @pytest.mark.asyncio
    async def test_view_unset(self, dispatch_raw):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("user timezone")
        assert e.value.disp_type == "user_timezone_unset"

    @pytest.mark.asyncio
    async def test_set_and_view(self, run, store):
        response = await run("user timezone America/New_York")
        assert not response.is_error
        assert "America/New_York" in response.desc
        assert store.get_user("200").timezone == "America/New_York"

        response = await run("user tz")
        assert not response.is_error
        assert "America/New_York" in response.desc

    @pytest.mark.asyncio
    async def test_invalid_not_stored(self, dispatch_raw, store):
        store.get_user("200").timezone = "UTC"
        with pytest.raises(SettingsValidationError) as e:
            await dispatch_raw("user timezone Mars/Olympus_Mons")
        assert e.value.disp_type == "user_timezone_invalid"
        assert store.get_user("200").timezone == "UTC"

    @pytest.mark.asyncio
    async def test_extra_argument_rejected(self, dispatch_raw, store):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("user timezone UTC Europe/London")
        assert e.value.disp_type == "settings_not_found"
        assert "Europe/London" in e.value.error_message
        assert store.get_user("200").timezone == ""

    @pytest.mark.asyncio
    async def test_stored_invalid(self, dispatch_raw, store):
        store.get_user("200").timezone = "Atlantis/Capital"
        with pytest.raises(SettingsValidationError) as e:
            await dispatch_raw("user timezone")
        assert e.value.disp_type == "user_timezone_stored_invalid"
        assert "&user timezone" in e.value.error_message


class TestSocials:
    """Tests for the socials settings."""

    @pytest.mark.asyncio
    async def test_usage(self, run):
        response = await run("user social")
        field_names = [name for name, _ in response.fields]
        assert "set / add" in field_names

    @pytest.mark.asyncio
    async def test_set_switch_fc(self, run, store):
        response = await run("user social set switchfc SW-1234-5678-9012")
        assert not response.is_error
        assert store.get_user("200").socials.switch_fc == "SW-1234-5678-9012"

    @pytest.mark.asyncio
    async def test_invalid_switch_fc_not_stored(self, dispatch_raw, store):
        with pytest.raises(SettingsValidationError):
            await dispatch_raw("user social set switchfc SW-1234-5678")
        assert store.get_user("200").socials.switch_fc == ""

    @pytest.mark.asyncio
    async def test_duplicate_value(self, dispatch_raw, store):
        store.get_user("200").socials.psn = "player"
        with pytest.raises(DuplicateValueError) as e:
            await dispatch_raw("user social set psn player")
        assert e.value.disp_type == "user_social_duplicate_psn"
        assert store.get_user("200").socials.psn == "player"

    @pytest.mark.asyncio
    async def test_alias_kind(self, run, store):
        await run("user socials add gamertag MasterChief")
        assert store.get_user("200").socials.xbox == "MasterChief"

    @pytest.mark.asyncio
    async def test_set_nnid(self, run, store, nnid_checker):
        response = await run("user social set nnid Ninty")
        assert not response.is_error
        nnid_checker.user_exists.assert_awaited_once_with("Ninty")
        assert store.get_user("200").socials.nnid == "Ninty"

    @pytest.mark.asyncio
    async def test_duplicate_nnid_skips_lookup(
            self,
            dispatch_raw,
            store,
            nnid_checker
    ):
        store.get_user("200").socials.nnid = "Ninty"
        with pytest.raises(DuplicateValueError):
            await dispatch_raw("user social set nnid Ninty")
        nnid_checker.user_exists.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_nnid(self, dispatch_raw, store, nnid_checker):
        nnid_checker.user_exists.return_value = False
        with pytest.raises(SettingsValidationError) as e:
            await dispatch_raw("user social set nnid Nobody")
        assert e.value.disp_type == "user_social_nnid_missing"
        assert store.get_user("200").socials.nnid == ""

    @pytest.mark.asyncio
    async def test_nnid_lookup_failure(self, run, store, nnid_checker):
        nnid_checker.user_exists.side_effect = IdentityCheckError("down")
        response = await run("user social set nnid Ninty")
        assert response.is_error
        assert response.desc == ENG_STRINGS["user_social_nnid_error_desc"]
        assert store.get_user("200").socials.nnid == ""

    @pytest.mark.asyncio
    async def test_nnid_without_checker(self, dispatch_raw, services):
        services.nnid_checker = None
        with pytest.raises(ExternalServiceError):
            await dispatch_raw("user social set nnid Ninty")

    @pytest.mark.asyncio
    async def test_set_missing_value(self, dispatch_raw):
        with pytest.raises(MissingArgumentError):
            await dispatch_raw("user social set psn")

    @pytest.mark.asyncio
    async def test_unknown_kind(self, dispatch_raw):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("user social set myspace tom")
        assert e.value.disp_type == "user_social_unknown"

    @pytest.mark.asyncio
    async def test_unknown_command(self, dispatch_raw):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("user social poke")
        assert e.value.disp_type == "user_social_command_unknown"

    @pytest.mark.asyncio
    async def test_list_empty(self, run):
        response = await run("user social list")
        assert response.desc == ENG_STRINGS["user_social_list_empty_desc"]

    @pytest.mark.asyncio
    async def test_list(self, run, store):
        store.get_user("200").socials.psn = "player"
        store.get_user("200").socials.switch_fc = "SW-1234-5678-9012"
        response = await run("user social list")
        assert response.fields == [
            (ENG_STRINGS["user_social_name_switchfc"], "SW-1234-5678-9012"),
            (ENG_STRINGS["user_social_name_psn"], "player")
        ]

    @pytest.mark.asyncio
    async def test_clear(self, run, store):
        store.get_user("200").socials.xbox = "MasterChief"
        response = await run("user social remove xbox")
        assert not response.is_error
        assert store.get_user("200").socials.xbox == ""

    @pytest.mark.asyncio
    async def test_clear_unset(self, dispatch_raw):
        with pytest.raises(NotFoundError) as e:
            await dispatch_raw("user social clear psn")
        assert e.value.disp_type == "user_social_unset_psn"

    @pytest.mark.asyncio
    async def test_clear_missing_kind(self, dispatch_raw):
        with pytest.raises(MissingArgumentError):
            await dispatch_raw("user social clear")

    @pytest.mark.asyncio
    async def test_extra_arguments_rejected(self, dispatch_raw, store):
        store.get_user("200").socials.psn = "player"
        with pytest.raises(NotFoundError):
            await dispatch_raw("user social set xbox gamer tag")
        with pytest.raises(NotFoundError):
            await dispatch_raw("user social clear psn xbox")
        assert store.get_user("200").socials.xbox == ""
        assert store.get_user("200").socials.psn == "player"

    @pytest.mark.asyncio
    async def test_available(self, run):
        response = await run("user social types")
        assert response.desc == ENG_STRINGS["user_social_available_desc"]
