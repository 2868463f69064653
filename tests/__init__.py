from os.path import dirname
from sys import path


# Add this project to the Python path.
path.append(dirname(dirname(__file__)))


ONE_URL = b'''<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
   <url>
      <loc>http://www.example.com/</loc>
      <lastmod>2005-01-01</lastmod>
      <changefreq>monthly</changefreq>
      <priority>0.8</priority>
   </url>
</urlset>'''


TWO_URLS = b'''<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
   <url>
      <loc>http://www.example.com/</loc>
      <lastmod>2005-01-01</lastmod>
      <changefreq>monthly</changefreq>
      <priority>0.8</priority>
   </url>
   <url>
      <loc>http://www.examples.com/</loc>
      <lastmod>2006-01-01</lastmod>
      <changefreq>weekly</changefreq>
      <priority>0.5</priority>
   </url>
</urlset>'''


WITH_SCHEMA = b'''<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
        xsi:schemaLocation="http://www.sitemaps.org/schemas/sitemap/0.9 http://www.sitemaps.org/schemas/sitemap/0.9/sitemap.xsd"
        xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
   <url>
      <loc>https://www.govinfo.gov/bulkdata/PLAW/117/private/PLAW-117pvtl1.xml</loc>
      <lastmod>2023-01-17T14:16:37.000Z</lastmod>
      <changefreq>monthly</changefreq>
   </url>
   <url>
      <loc>https://www.govinfo.gov/bulkdata/PLAW/117/private/PLAW-117pvtl2.xml</loc>
      <lastmod>2023-01-17T14:16:38.000Z</lastmod>
      <changefreq>monthly</changefreq>
   </url>
</urlset>'''


SITEMAP_INDEX = b'''<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
   <sitemap>
      <loc>http://www.example.com/sitemap1.xml.gz</loc>
      <lastmod>2004-10-01T18:23:17+00:00</lastmod>
   </sitemap>
   <sitemap>
      <loc>http://www.example.com/sitemap2.xml.gz</loc>
      <lastmod>2005-01-01</lastmod>
   </sitemap>
</sitemapindex>'''


def strip_whitespace(data):
    ''' Remove all whitespace from a document, for comparing output. '''
    if isinstance(data, bytes):
        data = data.decode('utf8')
    return ''.join(data.split())


def make_urlset(count, url='https://example.com/page'):
    ''' Make a sitemap document with ``count`` entries. '''
    parts = [b'<?xml version="1.0" encoding="UTF-8"?>\n',
        b'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n']
    for n in range(count):
        parts.append('<url><loc>{}{}</loc></url>\n'.format(url, n)
            .encode('utf8'))
    parts.append(b'</urlset>')
    return b''.join(parts)
