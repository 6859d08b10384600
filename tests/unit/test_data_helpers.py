"""Unit tests for the data-access helpers against SQLite."""

import datetime
import uuid

import pytest
from sqlalchemy import select

from collab.core.errors import OperationFailure
from collab.core.result import Err, Ok
from collab.data import (
    check_post_liked,
    create_brand_profile,
    create_creator_profile,
    create_post,
    delete_post,
    get_conversation_by_id,
    get_posts_by_user,
    list_users,
    mark_as_read,
    mark_message_as_read,
    toggle_post_like,
    toggle_user_verification,
)
from collab.db.models import (
    BrandProfile,
    BrandProfileData,
    BrandProfileRead,
    Conversation,
    CreatorProfile,
    CreatorProfileData,
    CreatorProfileRead,
    Match,
    MatchStatus,
    Message,
    Post,
    PostData,
    User,
    UserRole,
)

T0 = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)


def _user(role: UserRole, minutes: int = 0) -> User:
    when = T0 + datetime.timedelta(minutes=minutes)
    return User(role=role, created_at=when, updated_at=when)


async def _seed_conversation(session):
    """A creator and a brand, both with profiles, in a shortlisted match."""
    creator = _user(UserRole.CREATOR)
    brand = _user(UserRole.BRAND, minutes=1)
    match = Match(creator_id=creator.id, brand_id=brand.id, status=MatchStatus.SHORTLISTED)
    conversation = Conversation(match_id=match.id)

    session.add_all(
        [
            creator,
            brand,
            CreatorProfile(user_id=creator.id, instagram_handle="@ana", follower_count_ig=12000),
            BrandProfile(user_id=brand.id, company_name="Acme Skincare", vertical="beauty"),
            match,
            conversation,
        ]
    )
    await session.commit()
    return creator, brand, conversation


# =============================================================================
# Users
# =============================================================================


class TestUsers:
    """Test suite for user and admin helpers."""

    def test_toggle_verification(self, run_db):
        async def scenario(session):
            user = _user(UserRole.CREATOR)
            session.add(user)
            await session.commit()

            verified = await toggle_user_verification(session, user.id, True)
            flag_after_verify = verified.value.verified
            unverified = await toggle_user_verification(session, user.id, False)
            return verified, flag_after_verify, unverified

        verified, flag_after_verify, unverified = run_db(scenario)

        assert isinstance(verified, Ok)
        assert flag_after_verify is True
        assert isinstance(unverified, Ok)
        assert unverified.value.verified is False

    def test_toggle_verification_unknown_user(self, run_db):
        async def scenario(session):
            return await toggle_user_verification(session, uuid.uuid4(), True)

        result = run_db(scenario)

        assert isinstance(result, Err)
        assert result.error.failure is OperationFailure.NOT_FOUND
        assert "user not found" in result.error.message

    def test_list_users_newest_first(self, run_db):
        async def scenario(session):
            older, newer = _user(UserRole.CREATOR, 0), _user(UserRole.BRAND, 30)
            session.add_all([older, newer])
            await session.commit()
            result = await list_users(session)
            return result, [older.id, newer.id]

        result, (older_id, newer_id) = run_db(scenario)

        assert isinstance(result, Ok)
        assert [user.id for user in result.value] == [newer_id, older_id]


# =============================================================================
# Conversations & Messages
# =============================================================================


class TestConversations:
    """Test suite for get_conversation_by_id()."""

    def test_creator_sees_brand(self, run_db):
        async def scenario(session):
            creator, brand, conversation = await _seed_conversation(session)
            result = await get_conversation_by_id(session, conversation.id, creator.id)
            return result, brand

        result, brand = run_db(scenario)

        assert isinstance(result, Ok)
        detail = result.value
        assert detail.other_user.id == brand.id
        assert isinstance(detail.other_profile, BrandProfileRead)
        assert detail.other_profile.company_name == "Acme Skincare"
        assert detail.match.status == MatchStatus.SHORTLISTED

    def test_brand_sees_creator(self, run_db):
        async def scenario(session):
            creator, brand, conversation = await _seed_conversation(session)
            result = await get_conversation_by_id(session, conversation.id, brand.id)
            return result, creator

        result, creator = run_db(scenario)

        assert isinstance(result, Ok)
        assert result.value.other_user.id == creator.id
        assert isinstance(result.value.other_profile, CreatorProfileRead)
        assert result.value.other_profile.instagram_handle == "@ana"

    def test_serializes_with_camel_case_keys(self, run_db):
        async def scenario(session):
            creator, _, conversation = await _seed_conversation(session)
            return await get_conversation_by_id(session, conversation.id, creator.id)

        payload = run_db(scenario).value.model_dump(mode="json", by_alias=True)

        assert {"otherUser", "otherProfile", "match", "match_id"} <= payload.keys()

    def test_missing_conversation(self, run_db):
        async def scenario(session):
            return await get_conversation_by_id(session, uuid.uuid4(), uuid.uuid4())

        result = run_db(scenario)

        assert isinstance(result, Err)
        assert result.error.message == "Conversation not found"
        assert result.error.failure is OperationFailure.NOT_FOUND


class TestMessages:
    """Test suite for read receipts."""

    def test_mark_as_read_only_touches_other_senders_unread(self, run_db):
        async def scenario(session):
            creator, brand, conversation = await _seed_conversation(session)
            earlier = T0 - datetime.timedelta(days=1)
            messages = [
                Message(conversation_id=conversation.id, sender_id=brand.id, content="hi"),
                Message(conversation_id=conversation.id, sender_id=brand.id, content="there"),
                Message(conversation_id=conversation.id, sender_id=creator.id, content="mine"),
                Message(
                    conversation_id=conversation.id,
                    sender_id=brand.id,
                    content="seen",
                    read_at=earlier,
                ),
            ]
            session.add_all(messages)
            await session.commit()

            result = await mark_as_read(session, conversation.id, creator.id)
            rows = await session.execute(select(Message.content, Message.read_at))
            return result, {content: read_at for content, read_at in rows.all()}

        result, read_at = run_db(scenario)

        assert isinstance(result, Ok)
        assert result.value == 2
        assert read_at["hi"] is not None
        assert read_at["there"] is not None
        assert read_at["mine"] is None
        assert read_at["seen"].replace(tzinfo=None) == (T0 - datetime.timedelta(days=1)).replace(tzinfo=None)

    def test_mark_message_as_read_is_idempotent(self, run_db):
        async def scenario(session):
            creator, brand, conversation = await _seed_conversation(session)
            message = Message(conversation_id=conversation.id, sender_id=brand.id, content="hi")
            session.add(message)
            await session.commit()

            first = await mark_message_as_read(session, message.id)
            second = await mark_message_as_read(session, message.id)
            return first, second

        first, second = run_db(scenario)

        assert first == Ok(1)
        assert second == Ok(0)


# =============================================================================
# Posts
# =============================================================================


class TestPosts:
    """Test suite for publishing, listing, likes, and deletion."""

    def test_create_post(self, run_db):
        async def scenario(session):
            author = _user(UserRole.BRAND)
            session.add(author)
            await session.commit()
            result = await create_post(session, author.id, PostData(content="Launch day"))
            stored = await session.execute(select(Post.content, Post.likes_count))
            return result, author.id, stored.all()

        result, author_id, stored = run_db(scenario)

        assert isinstance(result, Ok)
        assert result.value.user_id == author_id
        assert result.value.image_url is None
        assert stored == [("Launch day", 0)]

    def test_posts_by_user_newest_first_with_author(self, run_db):
        async def scenario(session):
            creator, _, _ = await _seed_conversation(session)
            other = _user(UserRole.CREATOR)
            session.add(other)
            for minutes, content in [(0, "first"), (10, "second"), (20, "third")]:
                when = T0 + datetime.timedelta(minutes=minutes)
                session.add(Post(user_id=creator.id, content=content, created_at=when, updated_at=when))
            session.add(Post(user_id=other.id, content="not mine"))
            await session.commit()

            everything = await get_posts_by_user(session, creator.id)
            page = await get_posts_by_user(session, creator.id, limit=1, offset=1)
            return everything, page, creator.id

        everything, page, creator_id = run_db(scenario)

        assert [post.content for post in everything.value] == ["third", "second", "first"]
        assert all(post.user.id == creator_id for post in everything.value)
        assert isinstance(everything.value[0].profile, CreatorProfileRead)
        assert everything.value[0].profile.instagram_handle == "@ana"
        assert [post.content for post in page.value] == ["second"]

    def test_posts_by_user_without_posts(self, run_db):
        async def scenario(session):
            return await get_posts_by_user(session, uuid.uuid4())

        assert run_db(scenario) == Ok([])

    def test_toggle_like_twice(self, run_db):
        async def scenario(session):
            author, fan = _user(UserRole.BRAND), _user(UserRole.CREATOR)
            post = Post(user_id=author.id, content="New campaign")
            session.add_all([author, fan, post])
            await session.commit()

            async def likes():
                result = await session.execute(select(Post.likes_count).where(Post.id == post.id))
                return result.scalar_one()

            liked = await toggle_post_like(session, post.id, fan.id)
            after_like = (await likes(), await check_post_liked(session, post.id, fan.id))
            unliked = await toggle_post_like(session, post.id, fan.id)
            after_unlike = (await likes(), await check_post_liked(session, post.id, fan.id))
            return liked, after_like, unliked, after_unlike

        liked, after_like, unliked, after_unlike = run_db(scenario)

        assert liked.value.liked is True
        assert after_like == (1, Ok(True))
        assert unliked.value.liked is False
        assert after_unlike == (0, Ok(False))

    def test_toggle_like_unknown_post(self, run_db):
        async def scenario(session):
            return await toggle_post_like(session, uuid.uuid4(), uuid.uuid4())

        result = run_db(scenario)

        assert isinstance(result, Err)
        assert result.error.failure is OperationFailure.NOT_FOUND

    def test_delete_own_post(self, run_db):
        async def scenario(session):
            author = _user(UserRole.BRAND)
            post = Post(user_id=author.id, content="bye")
            session.add_all([author, post])
            await session.commit()

            result = await delete_post(session, post.id, author.id)
            remaining = await session.execute(select(Post).where(Post.id == post.id))
            return result, remaining.scalar_one_or_none()

        result, remaining = run_db(scenario)

        assert result == Ok(None)
        assert remaining is None

    def test_delete_someone_elses_post(self, run_db):
        async def scenario(session):
            author, other = _user(UserRole.BRAND), _user(UserRole.CREATOR)
            post = Post(user_id=author.id, content="mine")
            session.add_all([author, other, post])
            await session.commit()
            return await delete_post(session, post.id, other.id)

        result = run_db(scenario)

        assert isinstance(result, Err)
        assert result.error.message == "Unauthorized: You can only delete your own posts"
        assert result.error.failure is OperationFailure.FORBIDDEN

    def test_delete_unknown_post(self, run_db):
        async def scenario(session):
            return await delete_post(session, uuid.uuid4(), uuid.uuid4())

        result = run_db(scenario)

        assert isinstance(result, Err)
        assert result.error.message == "Failed to fetch post: post not found"


# =============================================================================
# Profiles
# =============================================================================


class TestProfiles:
    """Test suite for create_brand_profile()."""

    def test_create_then_update(self, run_db):
        async def scenario(session):
            brand = _user(UserRole.BRAND)
            session.add(brand)
            await session.commit()

            created = await create_brand_profile(
                session,
                brand.id,
                BrandProfileData(company_name="Acme", vertical="beauty", bio="Clean skincare"),
            )
            created_id, created_bio = created.value.id, created.value.bio
            updated = await create_brand_profile(
                session,
                brand.id,
                BrandProfileData(company_name="Acme Co", ad_spend_range="10k-50k"),
            )
            count = await session.execute(select(BrandProfile).where(BrandProfile.user_id == brand.id))
            return created_id, created_bio, updated, len(count.scalars().all())

        created_id, created_bio, updated, count = run_db(scenario)

        assert created_bio == "Clean skincare"
        assert isinstance(updated, Ok)
        assert updated.value.id == created_id
        assert updated.value.company_name == "Acme Co"
        assert updated.value.ad_spend_range == "10k-50k"
        # fields not sent on update are kept
        assert updated.value.vertical == "beauty"
        assert updated.value.bio == "Clean skincare"
        assert count == 1

    @pytest.mark.parametrize("campaigns", [None, [{"name": "Spring drop", "budget": 5000}]])
    def test_previous_campaigns_round_trip(self, run_db, campaigns):
        async def scenario(session):
            brand = _user(UserRole.BRAND)
            session.add(brand)
            await session.commit()
            return await create_brand_profile(
                session,
                brand.id,
                BrandProfileData(company_name="Acme", previous_campaigns=campaigns),
            )

        result = run_db(scenario)

        assert result.value.previous_campaigns == campaigns

    def test_creator_profile_create_then_update(self, run_db):
        async def scenario(session):
            creator = _user(UserRole.CREATOR)
            session.add(creator)
            await session.commit()

            created = await create_creator_profile(
                session,
                creator.id,
                CreatorProfileData(instagram_handle="@ana", follower_count_ig=1200, bio="Skincare"),
            )
            created_id = created.value.id
            updated = await create_creator_profile(
                session,
                creator.id,
                CreatorProfileData(follower_count_ig=5000, portfolio_items=[{"title": "Spring drop"}]),
            )
            rows = await session.execute(
                select(CreatorProfile).where(CreatorProfile.user_id == creator.id)
            )
            return created_id, updated, len(rows.scalars().all())

        created_id, updated, count = run_db(scenario)

        assert isinstance(updated, Ok)
        assert updated.value.id == created_id
        assert updated.value.follower_count_ig == 5000
        assert updated.value.portfolio_items == [{"title": "Spring drop"}]
        # fields not sent on update are kept
        assert updated.value.instagram_handle == "@ana"
        assert updated.value.bio == "Skincare"
        assert count == 1
