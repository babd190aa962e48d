"""End-to-end flows through the HTTP API."""


class TestCategoryLifecycle:
    """Create, reject duplicate, list and delete a category."""

    def test_full_lifecycle(self, client, auth_headers):
        created = client.post('/api/v1/categories', json={'name': 'Tech'}, headers=auth_headers)
        assert created.status_code == 201
        category = created.get_json()
        assert category['post_count'] == 0

        duplicate = client.post('/api/v1/categories', json={'name': 'tech'}, headers=auth_headers)
        assert duplicate.status_code == 409

        listed = client.get('/api/v1/categories').get_json()
        assert listed == [{'id': category['id'], 'name': 'Tech', 'post_count': 0}]

        deleted = client.delete(f"/api/v1/categories/{category['id']}", headers=auth_headers)
        assert deleted.status_code == 204
        assert client.get('/api/v1/categories').get_json() == []

        # The name is free again once the category is gone
        recreated = client.post('/api/v1/categories', json={'name': 'TECH'}, headers=auth_headers)
        assert recreated.status_code == 201


class TestPublishingFlow:
    """Log in, publish posts and watch the counts move."""

    def _login(self, client):
        response = client.post('/api/v1/auth', json={'email': 'author@example.com', 'password': 'authorpassword'})
        assert response.status_code == 200
        return {'Authorization': f"Bearer {response.get_json()['token']}"}

    def _create_post(self, client, headers, category_id, tag_ids, status):
        response = client.post('/api/v1/posts', headers=headers, json={
            'title': f'{status.title()} post',
            'content': 'word ' * 250,
            'category_id': category_id,
            'tag_ids': tag_ids,
            'status': status,
        })
        assert response.status_code == 201
        return response.get_json()

    def test_publish_and_count(self, client, test_user):
        headers = self._login(client)

        category = client.post('/api/v1/categories', json={'name': 'Backend'}, headers=headers).get_json()
        tags = client.post('/api/v1/tags', json={'names': ['flask', 'sql']}, headers=headers).get_json()
        tag_ids = [t['id'] for t in tags]

        published = self._create_post(client, headers, category['id'], tag_ids, 'PUBLISHED')
        draft = self._create_post(client, headers, category['id'], tag_ids[:1], 'DRAFT')
        assert published['reading_time'] == 2

        # Drafts are excluded from counts and public listings
        categories = client.get('/api/v1/categories').get_json()
        assert categories[0]['post_count'] == 1
        counts = {t['name']: t['post_count'] for t in client.get('/api/v1/tags').get_json()}
        assert counts == {'flask': 1, 'sql': 1}
        assert [p['id'] for p in client.get('/api/v1/posts').get_json()] == [published['id']]
        assert [p['id'] for p in client.get('/api/v1/posts/drafts', headers=headers).get_json()] == [draft['id']]

        # Categories and tags with posts are protected
        assert client.delete(f"/api/v1/categories/{category['id']}", headers=headers).status_code == 409
        assert client.delete(f'/api/v1/tags/{tag_ids[0]}', headers=headers).status_code == 409

        # Removing the posts frees them again
        assert client.delete(f"/api/v1/posts/{published['id']}", headers=headers).status_code == 204
        assert client.delete(f"/api/v1/posts/{draft['id']}", headers=headers).status_code == 204
        assert client.delete(f'/api/v1/tags/{tag_ids[0]}', headers=headers).status_code == 204
        assert client.delete(f"/api/v1/categories/{category['id']}", headers=headers).status_code == 204
