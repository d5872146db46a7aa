"""Curated snapshot of the latest known version of common npm packages.

This is a fixed table, not a live registry lookup. Keys are lowercase.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

_LATEST_VERSIONS: dict[str, str] = {
    "react": "19.0.0",
    "react-dom": "19.0.0",
    "vue": "3.5.13",
    "vue-router": "4.5.0",
    "next": "15.1.6",
    "nuxt": "3.16.1",
    "express": "4.21.2",
    "koa": "2.15.3",
    "fastify": "5.2.0",
    "axios": "1.7.9",
    "fetch": "2.0.0",
    "lodash": "4.17.21",
    "underscore": "1.13.6",
    "webpack": "5.97.1",
    "vite": "6.0.11",
    "rollup": "4.34.1",
    "esbuild": "0.24.2",
    "typescript": "5.7.3",
    "babel": "7.26.0",
    "tailwindcss": "3.4.17",
    "postcss": "8.5.1",
    "sass": "1.83.4",
    "node-sass": "9.0.0",
    "mongoose": "8.9.5",
    "prisma": "5.22.0",
    "graphql": "16.10.0",
    "apollo-server": "3.13.0",
    "jest": "29.7.0",
    "vitest": "2.1.8",
    "mocha": "11.0.1",
    "eslint": "9.17.0",
    "prettier": "3.4.2",
    "nodemon": "3.1.9",
    "pm2": "5.4.3",
    "dotenv": "16.4.7",
    "commander": "12.1.0",
    "chalk": "5.4.1",
    "ora": "7.0.1",
    "inquirer": "11.4.0",
    "yargs": "17.7.2",
    "meow": "13.2.0",
    "fs-extra": "11.3.0",
    "rimraf": "6.0.1",
    "mkdirp": "3.0.1",
    "glob": "11.0.0",
    "moment": "2.30.1",
    "dayjs": "1.11.13",
    "date-fns": "4.1.0",
    "luxon": "3.5.0",
    "uuid": "11.0.5",
    "crypto-js": "4.2.0",
    "validator": "13.12.0",
    "joi": "17.13.3",
    "zod": "3.24.1",
    "yup": "1.6.1",
    "jsonwebtoken": "9.0.2",
    "bcrypt": "5.1.1",
    "passport": "0.7.0",
    "cors": "2.8.5",
    "helmet": "8.0.0",
    "express-rate-limit": "7.5.0",
    "winston": "3.17.0",
    "pino": "9.6.0",
    "morgan": "1.10.0",
    "body-parser": "1.20.3",
    "cookie-parser": "1.4.7",
    "socket.io": "4.8.1",
    "ws": "8.18.0",
    "nodemailer": "6.9.16",
    "sharp": "0.33.5",
    "jimp": "1.6.0",
    "puppeteer": "24.1.0",
    "playwright": "1.49.1",
    "cheerio": "1.0.0",
    "jsdom": "26.0.0",
}

LATEST_VERSIONS: Mapping[str, str] = MappingProxyType(_LATEST_VERSIONS)


def with_overrides(overrides: Mapping[str, str]) -> Mapping[str, str]:
    """Return a read-only table with ``overrides`` layered over the defaults."""
    merged = dict(_LATEST_VERSIONS)
    merged.update({name.lower(): version for name, version in overrides.items()})
    return MappingProxyType(merged)
